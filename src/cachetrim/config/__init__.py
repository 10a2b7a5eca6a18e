"""Configuration loading for Cachetrim."""

from .loader import load_config
from .model import TrimConfig

__all__ = ["TrimConfig", "load_config"]
