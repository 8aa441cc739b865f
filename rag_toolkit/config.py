"""Application configuration for the text retrieval toolkit."""

import logging

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolkitConfig(BaseSettings):  # type: ignore[misc]
    """Default chunking and ranking parameters used by the command line."""

    chunk_size: int = Field(200, gt=0, description="Fixed-size window length in words")
    chunk_overlap: int = Field(
        20, ge=0, description="Words shared by consecutive fixed-size windows"
    )
    section_marker: str = Field(
        "#", min_length=1, description="Line prefix that starts a new section"
    )
    top_k: int = Field(5, gt=0, description="Number of ranked results to return")
    log_level: str = Field("WARNING", description="Logging level for the command line")

    model_config = SettingsConfigDict(
        env_prefix="RAG_TOOLKIT_", env_file=".env", extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @model_validator(mode="after")
    def validate_overlap(self) -> "ToolkitConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
