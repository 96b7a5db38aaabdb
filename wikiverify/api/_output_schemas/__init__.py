"""Pydantic output schemas for API commands (registered on import)."""
