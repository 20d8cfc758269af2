"""Configuration file handling."""
from rateconv.config.loader import ConfigLoader

__all__ = ['ConfigLoader']
