"""Converter configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MAX_LEN = 512


class ConvertConfig(BaseModel):
    """Options for one conversion run, immutable once parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(..., description="File or directory to convert")
    recursive: bool = Field(False, description="Walk through content of the directory recursively")
    silent: bool = Field(False, description="Do not print conversions")
    interactive: bool = Field(False, description="Prompt before each conversion")
    max_len: int = Field(DEFAULT_MAX_LEN, ge=0, description="Maximum file length to be considered as possible link")
    verbose: bool = Field(False, description="Explain what is being done")

    @model_validator(mode="after")
    def _check_silent_verbose(self) -> "ConvertConfig":
        if self.silent and self.verbose:
            raise ValueError("silent and verbose are mutually exclusive")
        return self
