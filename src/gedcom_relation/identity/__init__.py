from .id_factory import IdSeeds, IdSequence

__all__ = ["IdSeeds", "IdSequence"]
