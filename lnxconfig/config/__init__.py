"""
Parsing of line-oriented lnx node configuration files.
"""

from .errors import (
    AddressParseError,
    BadFormatError,
    ConfigError,
    ConfigIOError,
    ConfigValueError,
    InvalidAddressError,
    InvalidLineError,
    InvalidPortError,
    InvalidPrefixLengthError,
    MissingKeywordError,
    NoSuchNeighborError,
    UnknownDirectiveError,
)
from .lexer import Lexer, Token, tokenize_line
from .loader import ConfigLoader, load_config
from .parser import ConfigParser, parse_config, parse_config_file
from .schema import InterfaceConfig, LnxConfig, NeighborConfig, RoutingMode, StaticRoute

__all__ = [
    "Lexer",
    "Token",
    "tokenize_line",
    "ConfigParser",
    "ConfigLoader",
    "parse_config",
    "parse_config_file",
    "load_config",
    "LnxConfig",
    "InterfaceConfig",
    "NeighborConfig",
    "RoutingMode",
    "StaticRoute",
    "ConfigError",
    "AddressParseError",
    "InvalidAddressError",
    "InvalidPrefixLengthError",
    "InvalidPortError",
    "MissingKeywordError",
    "BadFormatError",
    "UnknownDirectiveError",
    "ConfigValueError",
    "NoSuchNeighborError",
    "InvalidLineError",
    "ConfigIOError",
]
