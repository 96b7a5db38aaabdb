"""Config API domain."""

from .ResolveConfig import ResolveConfig
from .ScanConfig import ScanConfig
from .WikiVerifyConfig import WikiVerifyConfig

__all__ = ["ResolveConfig", "ScanConfig", "WikiVerifyConfig"]
