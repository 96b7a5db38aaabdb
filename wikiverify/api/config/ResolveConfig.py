"""Resolve configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ResolveConfig(BaseModel):
    """How link targets are resolved."""

    model_config = ConfigDict(extra="forbid")

    ignore_example_links: bool = Field(
        True, description="Treat illustrative links (placeholders, templates, math, proposals) as resolved"
    )
