"""Document model returned by the step parser."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .step import Step


class ParseMode(str, Enum):
    """Strategy used to split input into steps."""

    ARROW = "arrow"
    LINE = "line"


class ParsedDocument(BaseModel):
    """Structured result of one parse.

    Created fresh for every parse and frozen once returned. ``steps`` is
    never empty and ``steps[i].number == i + 1`` for every index.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Derived or default document title")
    subtitle: str | None = Field(default=None, description="Default subtitle")
    steps: tuple[Step, ...] = Field(min_length=1, description="Steps in display order")
    mode: ParseMode = Field(description="Parse mode that produced the steps")
