"""
Configuration module for the cab billing system.
"""
from .settings import (
    CabBillingConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'CabBillingConfig',
    'get_config',
    'load_config',
    'reload_config'
]
