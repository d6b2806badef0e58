"""
Configuration loader with file reading and validation.
"""

from pathlib import Path

from ..logging import get_logger
from .parser import parse_config, parse_config_file
from .schema import LnxConfig, RoutingMode


logger = get_logger("config.loader")


class ConfigLoader:
    """
    Loads lnx configuration from files or strings and reports warnings.

    Usage:
        loader = ConfigLoader()
        config = loader.load_file("nodes/r1.lnx")
        # or
        config = loader.load_string(config_text)

    Parse failures propagate as ConfigError subclasses. Warnings from
    validate() never reject a configuration.
    """

    def load_file(self, path: str | Path) -> LnxConfig:
        """
        Load configuration from a file.

        Args:
            path: Path to the .lnx file

        Returns:
            Parsed LnxConfig

        Raises:
            ConfigIOError: If the file cannot be read
            InvalidLineError: If a line cannot be parsed
        """
        path = Path(path)
        config = parse_config_file(path)
        self._log_summary(config, str(path))
        return config

    # Short alias used by callers that only deal with files
    def load(self, path: str | Path) -> LnxConfig:
        return self.load_file(path)

    def load_string(self, source: str, filename: str = "<string>") -> LnxConfig:
        """
        Load configuration from a string.

        Args:
            source: Configuration source text
            filename: Filename for error messages

        Returns:
            Parsed LnxConfig
        """
        config = parse_config(source, filename)
        self._log_summary(config, filename)
        return config

    def _log_summary(self, config: LnxConfig, source: str) -> None:
        logger.info(
            f"Loaded {source}: {len(config.interfaces)} interfaces, "
            f"{len(config.neighbors)} neighbors, {len(config.static_routes)} static routes, "
            f"routing {config.routing_mode.value}"
        )

    def validate(self, config: LnxConfig) -> list[str]:
        """
        Validate configuration and return list of warnings.

        Args:
            config: Configuration to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        # Duplicate interface names are accepted by the parser
        seen: dict[str, int] = {}
        for iface in config.interfaces:
            seen[iface.name] = seen.get(iface.name, 0) + 1
        for name, count in seen.items():
            if count > 1:
                warnings.append(f"Interface '{name}' is declared {count} times")

        # Neighbor interface references are resolved by name only
        for neighbor in config.neighbors:
            if config.get_interface(neighbor.interface_name) is None:
                warnings.append(
                    f"Neighbor {neighbor.dest_addr} references unknown interface "
                    f"'{neighbor.interface_name}'"
                )

        if config.rip_advertise_targets and config.routing_mode is not RoutingMode.RIP:
            warnings.append(
                f"RIP advertise targets configured but routing mode is "
                f"'{config.routing_mode.value}'"
            )

        if config.static_routes and config.routing_mode is RoutingMode.NONE:
            warnings.append("Static routes configured but routing mode is 'none'")

        if config.tcp_rto_min_us > config.tcp_rto_max_us:
            warnings.append(
                f"TCP rto-min ({config.tcp_rto_min_us}us) is greater than "
                f"rto-max ({config.tcp_rto_max_us}us)"
            )

        for warning in warnings:
            logger.warning(warning)

        return warnings


def load_config(path: str | Path) -> LnxConfig:
    """
    Convenience function to load configuration from a file.

    Args:
        path: Path to the .lnx file

    Returns:
        Parsed LnxConfig
    """
    loader = ConfigLoader()
    return loader.load_file(path)
