"""infostep: turn free-form process descriptions into step infographics."""

from .core import parse
from .errors import EmptyInputError, ExportError, InfostepError, NoStepsFoundError, ParseError

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "ExportError",
    "InfostepError",
    "NoStepsFoundError",
    "ParseError",
    "__version__",
    "parse",
]
