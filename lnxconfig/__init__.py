"""
lnxconfig - parser for lnx virtual network node configuration files.
"""

from .const import APP_VERSION as __version__

__all__ = ["__version__"]
