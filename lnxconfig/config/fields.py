"""
Typed field parsers for directive arguments.

Every parser raises a specific AddressParseError subclass (or
ConfigValueError for numeric settings) so callers can tell which
subfield was rejected.
"""

from ipaddress import AddressValueError, IPv4Address, IPv4Interface

from .errors import (
    ConfigValueError,
    InvalidAddressError,
    InvalidPortError,
    InvalidPrefixLengthError,
)


MAX_PREFIX_LEN = 32
MAX_PORT = 65535
MAX_UINT = 2**64 - 1


def _bounded_int(digits: str, maximum: int) -> int | None:
    """Convert a decimal digit string, or return None if it exceeds maximum."""
    # int() refuses very long digit strings, so bound the length first
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(maximum)):
        return None
    number = int(significant)
    return number if number <= maximum else None


def parse_ipv4(value: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address, e.g. '10.0.0.1'."""
    try:
        return IPv4Address(value)
    except AddressValueError as e:
        raise InvalidAddressError(value, str(e)) from e


def parse_prefix(value: str) -> IPv4Interface:
    """
    Parse a CIDR prefix '<ipv4>/<len>'.

    The address is kept as written, host bits included:
    '192.168.1.1/24' keeps ip 192.168.1.1 on network 192.168.1.0/24.
    """
    address, sep, length = value.partition("/")
    ip = parse_ipv4(address)

    if not sep:
        raise InvalidPrefixLengthError(value, "missing '/<prefix-len>'")
    if not length.isascii() or not length.isdigit():
        raise InvalidPrefixLengthError(value, "prefix length must be a decimal number")
    prefix_len = _bounded_int(length, MAX_PREFIX_LEN)
    if prefix_len is None:
        raise InvalidPrefixLengthError(value, f"prefix length must be 0-{MAX_PREFIX_LEN}")

    return IPv4Interface((ip, prefix_len))


def parse_port(value: str) -> int:
    """Parse an unsigned 16-bit port number."""
    if not value.isascii() or not value.isdigit():
        raise InvalidPortError(value, "port must be a decimal number")
    port = _bounded_int(value, MAX_PORT)
    if port is None:
        raise InvalidPortError(value, f"port must be 0-{MAX_PORT}")
    return port


def parse_udp_endpoint(value: str) -> tuple[IPv4Address, int]:
    """Parse an '<ipv4>:<port>' pair."""
    address, sep, port = value.partition(":")
    if not sep:
        raise InvalidPortError(value, "missing ':<port>'")
    return parse_ipv4(address), parse_port(port)


def parse_uint(value: str, what: str = "value") -> int:
    """Parse a non-negative integer setting such as a timer."""
    if not value.isascii() or not value.isdigit():
        raise ConfigValueError(f"Invalid {what}: {value!r}")
    number = _bounded_int(value, MAX_UINT)
    if number is None:
        raise ConfigValueError(f"Invalid {what}: value out of range")
    return number
