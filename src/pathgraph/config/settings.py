"""Configuration settings for pathgraph."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometry cleanup before normalization."""

    canonicalize: bool = Field(
        default=False,
        description="Merge coincident nodes and split edges at nodes lying on them before normalizing",
    )
    merge_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance below which two nodes are the same point (drawing units)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for document processing."""

    skip_invalid: bool = Field(
        default=True,
        description="Record failing paths and continue instead of aborting the batch",
    )
    write_output: bool = Field(
        default=True,
        description="Write the normalized document after processing",
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


class PathGraphSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathGraphSettings:
    """Get default application settings."""
    return PathGraphSettings()
