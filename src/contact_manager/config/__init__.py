"""Contact Manager configuration package."""

from contact_manager.config.loader import clear_cache, load_config
from contact_manager.config.models import AppConfig

__all__ = ["AppConfig", "clear_cache", "load_config"]
