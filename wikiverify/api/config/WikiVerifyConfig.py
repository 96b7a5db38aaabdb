"""Top-level wikiverify configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ResolveConfig import ResolveConfig
from .ScanConfig import ScanConfig


class WikiVerifyConfig(BaseModel):
    """Top-level configuration for wikiverify."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    resolve: ResolveConfig = Field(default_factory=ResolveConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get the home directory from WIKIVERIFY_HOME or default to ~/.wikiverify."""
        home_env = os.environ.get("WIKIVERIFY_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".wikiverify"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "WikiVerifyConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except (TypeError, ValidationError) as e:
            if isinstance(e, ValidationError):
                error_list = e.errors() or [{"msg": str(e), "loc": ()}]
                first = error_list[0]
                error_msg = first.get("msg", str(e))
                loc = first.get("loc", ())
                field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
                detail = f"{field}: {error_msg}" if field else error_msg
            else:
                detail = "top-level value must be an object"
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "scan": self.scan.model_dump(),
            "resolve": self.resolve.model_dump(),
        }

