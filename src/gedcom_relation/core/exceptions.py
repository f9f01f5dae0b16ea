class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when reading, converting or writing a document fails."""


class EntityBuildError(ValueError):
    """Raised when a GEDCOM record lacks a field its relational entity requires."""
