"""Step model for parsed process steps.

Represents a single step extracted from free-form process text.
Steps are the units an infographic lays out, in display order.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IconHint(str, Enum):
    """Symbolic icon tag attached to every step.

    The parser picks one hint per parse mode. Only the renderer maps a
    hint to an actual glyph.
    """

    ARROW = "arrow"
    CHECKMARK = "checkmark"


class Step(BaseModel):
    """Parsed step from the input text.

    Attributes:
        id: Positional identifier ("step-0", "step-1", ...) used as a render key.
        number: 1-based position of the step in the document.
        title: Trimmed step title (may be empty for bare markers such as "1.").
        description: Trimmed description, or a synthesized placeholder.
        icon: Symbolic icon hint chosen by the parse mode.

    Example:
        >>> step = Step(
        ...     id="step-0",
        ...     number=1,
        ...     title="Plan",
        ...     description="Define scope",
        ...     icon=IconHint.CHECKMARK,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Positional identifier, unique within a document")
    number: int = Field(ge=1, description="Step number (1-indexed)")
    title: str = Field(description="Trimmed step title")
    description: str = Field(description="Trimmed or synthesized description")
    icon: IconHint = Field(description="Icon hint selected by parse mode")
