"""API module for wikiverify.

Each domain exposes ``cmd_*`` functions returning a StageResult; the CLI only
renders them.
"""

__all__ = []
