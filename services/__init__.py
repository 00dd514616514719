# services/__init__.py
"""Services package for the stall registration app"""

from . import catalog
from . import config_manager
from . import registration

__all__ = ['catalog', 'config_manager', 'registration']
