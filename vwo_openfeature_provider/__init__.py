"""
The vwo_openfeature_provider module contains the entry points for resolving OpenFeature flags with
a VWO client.
"""

from vwo_openfeature_provider.config import Config
from vwo_openfeature_provider.provider import VWOProvider
from vwo_openfeature_provider.version import VERSION

__version__ = VERSION

__all__ = ['Config', 'VWOProvider', '__version__']
