"""Configuration adapters."""

from myride_explorer.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
