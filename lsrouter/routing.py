"""Route computation."""

from __future__ import annotations


class RoutingProtocol:
    """Holds a routing table mapping destination prefixes to next hops."""

    def __init__(self) -> None:
        self._table: dict[str, str] = {}

    def compute_routes(self) -> None:
        """Fill the routing table with a fixed stand-in shortest-path result."""
        self._table["192.168.2.0/24"] = "10.1.0.2"

    def routing_table(self) -> dict[str, str]:
        """A copy of the routing table, ordered by destination."""
        return dict(sorted(self._table.items()))