"""
Configuration schema for an lnx node.

Entities are frozen dataclasses; LnxConfig is the mutable aggregate that
the parser fills line by line and then hands over to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from ipaddress import IPv4Address, IPv4Interface
from typing import NamedTuple

from ..const import (
    DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS,
    DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS,
    DEFAULT_TCP_RTO_MAX_US,
    DEFAULT_TCP_RTO_MIN_US,
)


class RoutingMode(Enum):
    """How the node populates its routing table."""
    NONE = "none"              # Unspecified
    STATIC = "static"          # Local and manually specified routes only (hosts)
    RIP = "rip"                # Learn and advertise routes via RIP (routers)


@dataclass(frozen=True)
class InterfaceConfig:
    """
    An interface of this node.

    Example:
        interface if0 10.0.0.1/24 127.0.0.1:5000
    """
    name: str
    assigned_prefix: IPv4Interface
    udp_addr: IPv4Address
    udp_port: int

    @property
    def assigned_ip(self) -> IPv4Address:
        """Address part of the assigned prefix, as written in the file."""
        return self.assigned_prefix.ip

    @property
    def prefix_len(self) -> int:
        return self.assigned_prefix.network.prefixlen


@dataclass(frozen=True)
class NeighborConfig:
    """
    How to reach a directly connected node.

    interface_name refers to an InterfaceConfig by name and is not
    resolved at parse time.
    """
    dest_addr: IPv4Address
    udp_addr: IPv4Address
    udp_port: int
    interface_name: str


class StaticRoute(NamedTuple):
    """A manually configured route: prefix -> next hop."""
    prefix: IPv4Interface
    next_hop: IPv4Address


@dataclass
class LnxConfig:
    """Root configuration object for one node."""
    interfaces: list[InterfaceConfig] = field(default_factory=list)
    neighbors: list[NeighborConfig] = field(default_factory=list)
    routing_mode: RoutingMode = RoutingMode.NONE

    # None until the first 'rip advertise-to' line is accepted
    rip_advertise_targets: list[IPv4Address] | None = None

    static_routes: list[StaticRoute] = field(default_factory=list)

    # RIP timers (routers only)
    rip_periodic_update_rate_ms: int = DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS
    rip_route_timeout_threshold_ms: int = DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS

    # TCP retransmission timeout bounds (hosts only)
    tcp_rto_min_us: int = DEFAULT_TCP_RTO_MIN_US
    tcp_rto_max_us: int = DEFAULT_TCP_RTO_MAX_US

    def get_interface(self, name: str) -> InterfaceConfig | None:
        """Get first interface with given name."""
        for iface in self.interfaces:
            if iface.name == name:
                return iface
        return None

    def get_neighbor(self, dest_addr: IPv4Address) -> NeighborConfig | None:
        """Get first neighbor with given destination address."""
        for neighbor in self.neighbors:
            if neighbor.dest_addr == dest_addr:
                return neighbor
        return None

    def get_neighbors_via(self, interface_name: str) -> list[NeighborConfig]:
        """Get all neighbors reached through the named interface."""
        return [n for n in self.neighbors if n.interface_name == interface_name]

    def add_rip_advertise_target(self, address: IPv4Address) -> None:
        """Append an advertisement target, creating the list on first use."""
        if self.rip_advertise_targets is None:
            self.rip_advertise_targets = []
        self.rip_advertise_targets.append(address)
