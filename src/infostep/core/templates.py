"""Placeholder text used when the input leaves something unstated."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserTemplates(BaseModel):
    """Default strings the parser falls back to.

    ``arrow_description`` and ``line_description`` are ``str.format``
    templates receiving the step title as ``{title}``.
    """

    model_config = ConfigDict(frozen=True)

    default_title: str = "Process Overview"
    default_subtitle: str = "Generated from manual input"
    arrow_description: str = Field(default="Execution of {title}")
    line_description: str = Field(default="Description for {title}")

    @field_validator("arrow_description", "line_description")
    @classmethod
    def _check_template(cls, value: str) -> str:
        try:
            value.format(title="")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Template may only reference {{title}}: {value!r}") from e
        return value


DEFAULT_TEMPLATES = ParserTemplates()
