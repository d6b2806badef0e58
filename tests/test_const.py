"""
Tests for constants.
"""

from lnxconfig import __version__
from lnxconfig.const import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS,
    DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS,
)


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "lnxconfig"
    assert __version__ == APP_VERSION


def test_rip_timeout_exceeds_update_rate():
    assert DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS > DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS
