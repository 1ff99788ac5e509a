"""Configuration management for infostep."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field

from .constants import EXPORT_WIDTH
from .core import ParserTemplates
from .models import ExportFormat, LayoutType, StyleOptions

CONFIG_DIR_NAME = ".infostep"
CONFIG_FILE_NAME = "config.toml"


class RenderConfig(BaseModel):
    """Configuration for terminal rendering."""

    layout: LayoutType = LayoutType.VERTICAL_CARDS
    width: int | None = Field(default=None, ge=20, description="Fixed width (None = terminal)")


class ExportConfig(BaseModel):
    """Configuration for infographic export."""

    format: ExportFormat = ExportFormat.SVG
    output_dir: Path = Path(".")
    width: int = Field(default=EXPORT_WIDTH, ge=20)


class InfostepConfig(BaseModel):
    """Root configuration for infostep."""

    style: StyleOptions = Field(default_factory=StyleOptions)
    render: RenderConfig = Field(default_factory=RenderConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    templates: ParserTemplates = Field(default_factory=ParserTemplates)

    def style_with(self, **overrides: object) -> StyleOptions:
        """Return the configured style with non-None overrides applied.

        Overrides go through validation, so bad colors raise
        pydantic.ValidationError.
        """
        data = self.style.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return StyleOptions.model_validate(data)


def get_config_dir(root: Path) -> Path:
    """Return the .infostep directory under root."""
    return root / CONFIG_DIR_NAME


def load_config(config_dir: Path) -> InfostepConfig:
    """Load config from .infostep/config.toml.

    Args:
        config_dir: Path to .infostep directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist
    """
    config_path = config_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return InfostepConfig()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return InfostepConfig.model_validate(data)


def write_config_template(config_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        config_dir: Path to .infostep directory

    Returns:
        Path to the written config file
    """
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / CONFIG_FILE_NAME
    defaults = InfostepConfig()
    template = {
        "style": defaults.style.model_dump(mode="json"),
        "render": {"layout": defaults.render.layout.value},
        "export": {
            "format": defaults.export.format.value,
            "output_dir": str(defaults.export.output_dir),
            "width": defaults.export.width,
        },
        # Placeholder text; {title} is replaced with the step title
        "templates": defaults.templates.model_dump(),
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
