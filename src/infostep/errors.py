"""Errors raised by infostep."""


class InfostepError(Exception):
    """Base exception for infostep errors."""


class ParseError(InfostepError):
    """Raised when input text cannot be turned into a document.

    Attributes:
        message: Short description of the failure
        hint: Optional guidance suitable for showing to the end user
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class EmptyInputError(ParseError):
    """Raised when the trimmed input is too short to parse."""

    def __init__(self) -> None:
        super().__init__(
            "empty input",
            hint="Please provide content to transform into an infographic.",
        )


class NoStepsFoundError(ParseError):
    """Raised when parsing finishes without producing a single step."""

    def __init__(self) -> None:
        super().__init__(
            "no steps found",
            hint="Use '1. Step' or 'Step 1 -> Step 2' format.",
        )


class ExportError(InfostepError):
    """Raised when a rendered infographic cannot be serialized."""
