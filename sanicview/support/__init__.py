"""
Framework Support Classes
"""

from sanicview.support.env_helper import EnvHelper
from sanicview.support.config import Config, ConfigObject

__all__ = [
    'EnvHelper',
    'Config',
    'ConfigObject',
]
