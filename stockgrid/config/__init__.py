"""
Configuration management for the chart grid.
"""
from .defaults import StockGridConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["StockGridConfig", "get_default_config", "ConfigLoader"]
