"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..link.discover_files import DEFAULT_EXCLUDE_DIRNAMES, parse_extensions


class ScanConfig(BaseModel):
    """Which files a verification run reads."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: ["md", "mdx"], description="File extensions to scan")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Directory names skipped at any depth",
    )
    exclude_globs: list[str] = Field(default_factory=list, description="Glob patterns of workspace paths to skip")
    include_hidden: bool = Field(False, description="Scan dot-files and dot-directories")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        parsed = parse_extensions(v)
        if not parsed:
            raise ValueError("at least one extension is required")
        return parsed

    @field_validator("exclude_globs")
    @classmethod
    def _validate_globs(cls, v: list[str]) -> list[str]:
        globs = [entry.strip() for entry in v]
        if any(not entry for entry in globs):
            raise ValueError("Glob pattern cannot be empty")
        return globs
