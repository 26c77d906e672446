"""
Utility modules for the supply request service
"""
from .config_loader import NecessitousConfig, load_necessitous_config

__all__ = [
    'NecessitousConfig',
    'load_necessitous_config',
]
