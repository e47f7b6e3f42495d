"""Configuration settings for Curveclip."""

from pathlib import Path

from pydantic import BaseModel, Field

from curveclip.domain import EdgePlacement


class OutlineConfig(BaseModel):
    """Configuration for outline building."""

    placement: EdgePlacement = Field(
        default=EdgePlacement.LEFT,
        description="Side of the rectangle replaced by the curve",
    )
    reclip: bool = Field(
        default=True,
        description="Tell the host to rebuild the outline on every pass",
    )
    strict: bool = Field(
        default=False,
        description="Raise on degenerate segments instead of emitting NaN/Infinity",
    )


class RenderConfig(BaseModel):
    """Configuration for flattening and SVG output."""

    flatten_tolerance: float = Field(
        default=0.5,
        gt=0.0,
        le=10.0,
        description="Maximum distance between a curve and its flattened polygon",
    )
    precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Decimals kept in SVG path coordinates",
    )
    fill: str = Field(
        default="#3b82f6",
        description="Fill colour of the preview path in written SVG files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CurveClipSettings(BaseModel):
    """Main application settings."""

    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurveClipSettings:
    """Get default application settings."""
    return CurveClipSettings()
