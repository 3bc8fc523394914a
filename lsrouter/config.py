"""Reading of the router configuration file."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass
class RouterConfig:
    """Settings of one router section."""

    hostname: str = ""
    interfaces: list[str] = field(default_factory=list)
    port: int = 0


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping one trailing empty field."""
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_router_config(path) -> dict[str, RouterConfig]:
    """Parse every ``[RouterID]`` section of the file at ``path``.

    A file that cannot be opened yields an empty mapping.
    """
    configs: dict[str, RouterConfig] = {}
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        print(f"Failed to open config file: {path}", file=sys.stderr)
        return configs

    section = ""
    current = RouterConfig()
    with handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line or line.startswith("//"):
                continue
            if line.startswith("[") and line.endswith("]"):
                if section:
                    configs[section] = current
                section = line[1:-1]
                current = RouterConfig()
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            if key == "hostname":
                current.hostname = value
            elif key == "interfaces":
                current.interfaces = split(value, ",")
            elif key == "port":
                current.port = _parse_int(value)

    if section:
        configs[section] = current
    return configs


def get_router_config(router_id: str, path) -> RouterConfig:
    """The configuration of ``router_id``, or an empty one if it is absent."""
    configs = parse_router_config(path)
    try:
        return configs[router_id]
    except KeyError:
        print(f"Router ID {router_id} not found in config file.", file=sys.stderr)
        return RouterConfig()