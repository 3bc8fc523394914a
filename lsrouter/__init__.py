"""Link-state router daemon with UDP HELLO neighbour discovery."""

__version__ = "0.1.0"
__all__ = ["cli", "config", "linkstate", "packets", "router_node", "routing"]