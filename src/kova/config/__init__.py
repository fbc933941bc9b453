from kova.config.loader import ConfigLoader
from kova.config.models import ValidationConfig

__all__ = ["ConfigLoader", "ValidationConfig"]
