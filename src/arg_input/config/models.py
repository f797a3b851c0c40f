from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class InputConfig(BaseModel):
    # strict=True restores all-or-nothing opening: fail before reading if any file is unavailable.
    model_config = ConfigDict(extra="forbid")
    strict: bool = False


class OutputConfig(BaseModel):
    # Line decorations applied by the CLI when copying the chain to stdout.
    model_config = ConfigDict(extra="forbid")
    number_lines: bool = False
    show_source: bool = False


class LoggingConfig(BaseModel):
    # Log sink selector; only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For the jsonl sink a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
