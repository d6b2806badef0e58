"""
Directive-dispatch parser for the lnx configuration format.

Every non-empty line is one directive. The first token selects a handler,
the handler checks the token count, parses the typed fields and updates
the LnxConfig aggregate. Lines are processed once, in file order, so a
directive can only refer to things declared above it.

Grammar:
    interface <name> <ipv4>/<prefix-len> <ipv4>:<port>
    neighbor <ipv4> at <ipv4>:<port> via <name>
    routing none|static|rip
    route <ipv4>/<prefix-len> via <ipv4>
    rip advertise-to <ipv4>
    rip periodic-update-rate <ms>
    rip route-timeout-threshold <ms>
    tcp rto-min <us>
    tcp rto-max <us>
"""

from pathlib import Path
from typing import Callable

from ..logging import get_logger
from .errors import (
    BadFormatError,
    ConfigError,
    ConfigIOError,
    ConfigValueError,
    InvalidLineError,
    MissingKeywordError,
    NoSuchNeighborError,
    UnknownDirectiveError,
)
from .fields import parse_ipv4, parse_prefix, parse_udp_endpoint, parse_uint
from .lexer import tokenize_line
from .schema import InterfaceConfig, LnxConfig, NeighborConfig, RoutingMode, StaticRoute


logger = get_logger("config.parser")


def _split_lines(source: str) -> list[str]:
    """Split on LF and CRLF line endings only."""
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _expect_arity(tokens: list[str], expected: int) -> None:
    if len(tokens) != expected:
        raise BadFormatError(tokens[0], expected, len(tokens))


def _expect_keyword(tokens: list[str], index: int, keyword: str) -> None:
    if tokens[index] != keyword:
        raise MissingKeywordError(keyword, tokens[index])


class ConfigParser:
    """
    Line-by-line parser that accumulates into an LnxConfig.

    Usage:
        parser = ConfigParser()
        parser.parse_all(text)
        config = parser.config
    """

    def __init__(self, config: LnxConfig | None = None, filename: str = "<string>"):
        self.config = config if config is not None else LnxConfig()
        self.filename = filename

        self._directives: dict[str, Callable[[list[str]], None]] = {
            "interface": self._parse_interface,
            "neighbor": self._parse_neighbor,
            "routing": self._parse_routing,
            "route": self._parse_route,
            "rip": self._parse_rip,
            "tcp": self._parse_tcp,
        }

    def parse_all(self, source: str) -> None:
        """
        Parse every line of source into the aggregate.

        Stops at the first failing line and raises InvalidLineError with
        the verbatim line text; lines before it stay applied.
        """
        for lineno, line in enumerate(_split_lines(source), start=1):
            try:
                self.parse_line(line, lineno)
            except InvalidLineError:
                raise
            except ConfigError as e:
                raise InvalidLineError(line, e, lineno, self.filename) from e

    def parse_line(self, line: str, lineno: int = 0) -> None:
        """Parse a single line, updating the aggregate."""
        tokens = [token.value for token in tokenize_line(line, lineno)]
        if not tokens:
            return

        directive = tokens[0]
        handler = self._directives.get(directive)
        if handler is None:
            raise UnknownDirectiveError(directive)

        handler(tokens)
        logger.debug(f"{self.filename}:{lineno}: {' '.join(tokens)}")

    def _parse_interface(self, tokens: list[str]) -> None:
        """Format: interface <name> <ipv4>/<prefix-len> <ipv4>:<port>"""
        _expect_arity(tokens, 4)

        name = tokens[1]
        assigned_prefix = parse_prefix(tokens[2])
        udp_addr, udp_port = parse_udp_endpoint(tokens[3])

        self.config.interfaces.append(
            InterfaceConfig(
                name=name,
                assigned_prefix=assigned_prefix,
                udp_addr=udp_addr,
                udp_port=udp_port,
            )
        )

    def _parse_neighbor(self, tokens: list[str]) -> None:
        """Format: neighbor <ipv4> at <ipv4>:<port> via <name>"""
        _expect_arity(tokens, 6)

        dest_addr = parse_ipv4(tokens[1])
        _expect_keyword(tokens, 2, "at")
        udp_addr, udp_port = parse_udp_endpoint(tokens[3])
        _expect_keyword(tokens, 4, "via")

        self.config.neighbors.append(
            NeighborConfig(
                dest_addr=dest_addr,
                udp_addr=udp_addr,
                udp_port=udp_port,
                interface_name=tokens[5],
            )
        )

    def _parse_routing(self, tokens: list[str]) -> None:
        """Format: routing none|static|rip"""
        _expect_arity(tokens, 2)

        try:
            mode = RoutingMode(tokens[1])
        except ValueError:
            raise ConfigValueError(f"Invalid routing type: {tokens[1]}") from None

        self.config.routing_mode = mode

    def _parse_route(self, tokens: list[str]) -> None:
        """Format: route <ipv4>/<prefix-len> via <ipv4>"""
        _expect_arity(tokens, 4)

        prefix = parse_prefix(tokens[1])
        _expect_keyword(tokens, 2, "via")
        next_hop = parse_ipv4(tokens[3])

        self.config.static_routes.append(StaticRoute(prefix, next_hop))

    def _parse_rip(self, tokens: list[str]) -> None:
        """
        Format:
            rip advertise-to <ipv4>
            rip periodic-update-rate <ms>
            rip route-timeout-threshold <ms>
        """
        _expect_arity(tokens, 3)

        command = tokens[1]
        if command == "advertise-to":
            address = parse_ipv4(tokens[2])
            neighbor = self.config.get_neighbor(address)
            if neighbor is None:
                raise NoSuchNeighborError(address)
            self.config.add_rip_advertise_target(neighbor.dest_addr)
        elif command == "periodic-update-rate":
            self.config.rip_periodic_update_rate_ms = parse_uint(
                tokens[2], "RIP periodic update rate"
            )
        elif command == "route-timeout-threshold":
            self.config.rip_route_timeout_threshold_ms = parse_uint(
                tokens[2], "RIP route timeout threshold"
            )
        else:
            # 'rip originate' is not supported
            raise MissingKeywordError("advertise-to", command)

    def _parse_tcp(self, tokens: list[str]) -> None:
        """Format: tcp rto-min|rto-max <us>"""
        _expect_arity(tokens, 3)

        command = tokens[1]
        if command == "rto-min":
            self.config.tcp_rto_min_us = parse_uint(tokens[2], "TCP minimum RTO")
        elif command == "rto-max":
            self.config.tcp_rto_max_us = parse_uint(tokens[2], "TCP maximum RTO")
        else:
            raise MissingKeywordError("rto-min|rto-max", command)


def parse_config(source: str, filename: str = "<string>") -> LnxConfig:
    """
    Convenience function to parse a configuration string.

    Args:
        source: Configuration text
        filename: Filename for error messages

    Returns:
        Populated LnxConfig
    """
    parser = ConfigParser(filename=filename)
    parser.parse_all(source)
    return parser.config


def parse_config_file(path: str | Path) -> LnxConfig:
    """
    Parse a configuration file.

    The whole file is read as UTF-8 before any line is parsed.

    Args:
        path: Path to the .lnx file

    Returns:
        Populated LnxConfig

    Raises:
        ConfigIOError: If the file cannot be read or decoded
        InvalidLineError: If a line fails to parse
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(path, str(e)) from e
    return parse_config(source, str(path))
