from __future__ import annotations

from .load import load_config
from .schema import AppConfig, AppwriteConfig, EnvOverrides, SearchConfig

__all__ = ["AppConfig", "AppwriteConfig", "EnvOverrides", "SearchConfig", "load_config"]
