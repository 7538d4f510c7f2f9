"""Configuration loading."""

from foliowatch.config.loader import load_config

__all__ = ["load_config"]
