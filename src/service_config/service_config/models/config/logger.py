# ABOUTME: Logger section models: an enabled sink descriptor or the disabled sentinel
# ABOUTME: Includes pretty-print options that render to a loguru format string

from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enum import LogDestination

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class PrettyPrintOptions(BaseModel):
    """Human-readable output options for an enabled logger."""

    colorize: bool = True
    level_first: bool = True
    translate_time: str = "YYYY-MM-DD HH:mm:ss"

    model_config = ConfigDict(frozen=True, extra="forbid")

    def format(self) -> str:
        """Render the options as a loguru format string."""
        time_part = f"<green>{{time:{self.translate_time}}}</green>"
        level_part = "<level>{level: <8}</level>"
        head = f"{level_part} | {time_part}" if self.level_first else f"{time_part} | {level_part}"
        tail = "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
        return f"{head} | {tail}"


class LoggerSection(BaseModel):
    """
    Descriptor of an enabled log sink.

    ``sink`` is the long-lived output handle owned by the section: a console
    writer in development, an append-mode file writer in production. It is
    acquired when the section is resolved and kept open for the process
    lifetime.
    """

    enabled: Literal[True] = True
    destination: LogDestination = Field(description="Console or file output")
    path: Optional[Path] = Field(default=None, description="Log file path for file destinations")
    pretty_print: Optional[PrettyPrintOptions] = Field(
        default=None, description="Human-readable formatting; None emits JSON lines"
    )
    level: LogLevel = Field(description="Minimum severity written to the sink")
    sink: Any = Field(exclude=True, repr=False, description="Writable handle with a write(message) method")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("level", mode="before")
    @classmethod
    def validate_level_case_insensitive(cls, v: str) -> str:
        """Validate level with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class LoggingDisabled(BaseModel):
    """Sentinel for a logger section with logging turned off. Always falsy."""

    enabled: Literal[False] = False

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return False


LOGGING_DISABLED = LoggingDisabled()

AnyLoggerSection = Union[LoggerSection, LoggingDisabled]
