"""Core: settings and environment.

Single place for configuration shared by the store, auth adapter and scripts.
"""

from fallback_store.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
