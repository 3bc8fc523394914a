"""A router and its network interfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Interface:
    """A network interface of a router."""

    ip: str
    active: bool
    capacity: int


class RouterNode:
    """A named router holding an ordered list of interfaces."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._interfaces: list[Interface] = []

    def add_interface(self, iface: Interface) -> None:
        """Append an interface."""
        self._interfaces.append(iface)

    def print_interfaces(self) -> None:
        """Print each interface's address and state, one per line."""
        for iface in self._interfaces:
            print(f"{iface.ip} [{'UP' if iface.active else 'DOWN'}]")

    def active_interfaces(self) -> list[Interface]:
        """The interfaces that are up, in the order they were added."""
        return [iface for iface in self._interfaces if iface.active]