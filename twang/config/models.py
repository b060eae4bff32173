# twang/config/models.py

"""
Pydantic models for defining the structure and validation of the twang
configuration (twang.toml). Uses Pydantic V2 syntax.
"""

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Helper Functions ---

def _resolve_path(path: Union[str, Path]) -> Path:
    """Resolves and expands user paths."""
    return Path(path).expanduser().resolve()

# --- Model Definitions ---

class DefaultsConfig(BaseModel):
    """Default rendering parameters used when the CLI does not override them."""
    sample_rate: int = Field(48000, gt=0, description="Sample rate (Hz) for rendered audio.")
    duration: float = Field(5.0, ge=0, description="Rendered duration in seconds.")
    frequency: float = Field(440.0, gt=0, description="Fundamental frequency (Hz) handed to patches.")
    patch: str = Field("voice", description="Patch rendered when none is given.")
    subtype: Optional[str] = Field("PCM_16", description="soundfile subtype for written files (e.g. 'PCM_16', 'FLOAT').")

class PathsConfig(BaseModel):
    """Configuration for file paths used by twang."""
    output_dir: Path = Field(default=Path("./twang_output"), validate_default=True, description="Default directory for rendered files.")
    log_directory: Path = Field(default=Path("./twang_logs"), validate_default=True, description="Directory for log files.")

    @field_validator('output_dir', 'log_directory', mode='before')
    @classmethod
    def resolve_paths_before_validation(cls, value: Any) -> Any:
        """Resolves paths before Pydantic validates them."""
        if isinstance(value, (str, Path)):
            return _resolve_path(value)
        return value

class LoggingConfig(BaseModel):
    """Logging configuration settings."""
    log_file_enabled: bool = Field(True, description="Enable/disable persistent file logging.")
    log_filename_template: str = Field("twang_run_{timestamp:%Y%m%d_%H%M%S}.log", description="Naming pattern for log files.")
    log_level_file: str = Field("DEBUG", description="Minimum level for file logs (DEBUG, INFO, WARNING, ERROR, CRITICAL).")
    log_format: str = Field("%(asctime)s [%(levelname)-8s] %(name)-30s - %(message)s (%(filename)s:%(lineno)d)", description="Format string for file log entries.")
    log_level_console: str = Field("WARNING", description="Default minimum level for console output (overridden by verbosity flags).")

    @field_validator('log_level_file', 'log_level_console')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Validate log level strings."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(f"Invalid log level '{value}'. Must be one of {allowed_levels}")
        return upper_value

class TwangConfig(BaseModel):
    """Root configuration model for twang."""
    model_config = ConfigDict(
        extra='allow',
        validate_assignment=True
    )

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
