"""
Entry point for lnxconfig.

Usage:
    python -m lnxconfig /path/to/node.lnx
    python -m lnxconfig --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.errors import ConfigError
from .config.loader import ConfigLoader
from .config.schema import LnxConfig
from .const import LNX_FILE_SUFFIX
from .logging import get_logger, level_from_flags, setup_logging


logger = get_logger("main")


def print_summary(config: LnxConfig) -> None:
    """Print a human-readable overview of a parsed configuration."""
    print("Configuration summary:")
    print(f"  Routing mode: {config.routing_mode.value}")
    print(f"  Interfaces: {len(config.interfaces)}")
    for iface in config.interfaces:
        print(f"    {iface.name}: {iface.assigned_prefix} (udp {iface.udp_addr}:{iface.udp_port})")
    print(f"  Neighbors: {len(config.neighbors)}")
    for neighbor in config.neighbors:
        print(
            f"    {neighbor.dest_addr} via {neighbor.interface_name} "
            f"(udp {neighbor.udp_addr}:{neighbor.udp_port})"
        )
    print(f"  Static routes: {len(config.static_routes)}")
    for route in config.static_routes:
        print(f"    {route.prefix} -> {route.next_hop}")
    if config.rip_advertise_targets is not None:
        targets = ", ".join(str(addr) for addr in config.rip_advertise_targets)
        print(f"  RIP advertise to: {targets}")
    print(
        f"  RIP timers: update {config.rip_periodic_update_rate_ms}ms, "
        f"timeout {config.rip_route_timeout_threshold_ms}ms"
    )
    print(f"  TCP RTO: {config.tcp_rto_min_us}us - {config.tcp_rto_max_us}us")


def check_config(config_path: str) -> int:
    """Load configuration file, print warnings and a summary."""
    try:
        loader = ConfigLoader()
        config = loader.load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    warnings = loader.validate(config)
    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")
        print()

    print_summary(config)
    print("\nConfiguration is valid!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="lnxconfig",
        description="Parse and check an lnx virtual network node configuration file",
    )

    parser.add_argument(
        "config",
        help=f"Path to {LNX_FILE_SUFFIX} configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging(
        console_level=level_from_flags(args.debug, args.verbose, args.quiet),
        colors=not args.no_color,
        log_file=args.log_file,
    )

    if Path(args.config).suffix != LNX_FILE_SUFFIX:
        logger.warning(f"{args.config} does not have the usual {LNX_FILE_SUFFIX} suffix")
    logger.debug(f"Checking {args.config}")

    return check_config(args.config)


if __name__ == "__main__":
    sys.exit(main())
