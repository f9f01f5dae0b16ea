from .context import ParseContext
from .exceptions import EntityBuildError, ParseExecutionError, PipelineError

__all__ = ["EntityBuildError", "ParseContext", "ParseExecutionError", "PipelineError"]
