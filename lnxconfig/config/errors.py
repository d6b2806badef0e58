"""
Exception hierarchy for lnx configuration parsing.

Field parsers and directive handlers raise the specific errors below.
The line dispatcher wraps whichever one escapes into an InvalidLineError
that keeps the offending source line.
"""

from pathlib import Path


class ConfigError(Exception):
    """Base class for all configuration errors."""

    pass


class AddressParseError(ConfigError, ValueError):
    """Exception raised for a malformed address, prefix or port field."""

    subfield = "address"

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"Invalid {self.subfield}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidAddressError(AddressParseError):
    """Malformed IPv4 address."""

    subfield = "IPv4 address"


class InvalidPrefixLengthError(AddressParseError):
    """Missing, malformed or out-of-range CIDR prefix length."""

    subfield = "prefix length"


class InvalidPortError(AddressParseError):
    """Missing, malformed or out-of-range UDP port."""

    subfield = "port"


class MissingKeywordError(ConfigError):
    """A fixed keyword was expected but a different token was found."""

    def __init__(self, expected: str, found: str | None = None):
        self.expected = expected
        self.found = found
        if found is None:
            super().__init__(f"Missing token: {expected}")
        else:
            super().__init__(f"Missing token: expected {expected!r}, got {found!r}")


class BadFormatError(ConfigError):
    """Token count does not match the directive's arity."""

    def __init__(self, directive: str, expected: int, found: int):
        self.directive = directive
        self.expected = expected
        self.found = found
        super().__init__(
            f"Bad format: '{directive}' expects {expected} tokens, got {found}"
        )


class UnknownDirectiveError(ConfigError):
    """The first token of a line is not a known directive."""

    def __init__(self, directive: str):
        self.directive = directive
        super().__init__(f"Invalid directive: {directive}")


class ConfigValueError(ConfigError, ValueError):
    """A semantic constraint on a directive value failed."""

    pass


class NoSuchNeighborError(ConfigValueError):
    """An advertisement target does not match any declared neighbor."""

    def __init__(self, address: object):
        self.address = address
        super().__init__(f"No neighbor with address {address}")


class InvalidLineError(ConfigError):
    """
    Wraps an error raised while parsing one line.

    The verbatim source line is kept so the diagnostic can show exactly
    what was rejected.
    """

    def __init__(
        self,
        line: str,
        cause: ConfigError,
        lineno: int = 0,
        filename: str = "<string>",
    ):
        self.line = line
        self.cause = cause
        self.lineno = lineno
        self.filename = filename
        super().__init__(f"{filename}:{lineno}: Invalid line: {line}\n{cause}")


class ConfigIOError(ConfigError):
    """The configuration file could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error reading file {self.path}: {reason}")
