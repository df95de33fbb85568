"""
Utility modules for the open market client
"""
from .config_loader import MarketConfig, load_market_config

__all__ = [
    'MarketConfig',
    'load_market_config',
]
