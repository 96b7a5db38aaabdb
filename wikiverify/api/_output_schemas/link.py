"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class BrokenLinkOutput(BaseModel):
    """One unresolved wiki link."""

    source: str = Field(..., description="Workspace-relative path of the file containing the link")
    target: str = Field(..., description="Link target as written (not normalized)")
    line: int = Field(..., description="1-based line number")
    column: int = Field(..., description="1-based column of the opening brackets")
    raw: str = Field(..., description="Full link text including brackets")


class LinkVerifyOutput(BaseOutputSchema):
    """Output schema for link verify command."""

    workspace_path: str = Field(..., description="Absolute path of the verified workspace")
    extensions: list[str] = Field(..., description="File extensions that were scanned")
    total_files: int = Field(..., description="Number of files matched by the extension filter")
    total_links: int = Field(..., description="Number of wiki links found, resolved or not")
    broken_links: list[BrokenLinkOutput] = Field(..., description="Unresolved links in file, line, column order")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command."""

    path: str = Field(..., description="Workspace-relative path of the checked file")
    workspace_path: str = Field(..., description="Absolute path of the workspace used for resolution")
    links: list[dict] = Field(..., description="Every wiki link in the file with its resolution status")


schema_registry.register_output_schema("link", "verify", LinkVerifyOutput)
schema_registry.register_output_schema("link", "check", LinkCheckOutput)
