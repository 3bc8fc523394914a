"""Command that runs one router: broadcast HELLOs and track neighbours."""

from __future__ import annotations

import sys
import threading
import time

from .config import get_router_config
from .linkstate import LinkStateManager
from .packets import PacketManager

CONFIG_FILE = "config/router.conf"
DEFAULT_ROUTER_ID = "R_1"
HELLO_INTERVAL = 5.0


def calculate_broadcast_address(ip: str) -> str:
    """Replace the last dotted component of ``ip`` with 255."""
    last_dot = ip.rfind(".")
    if last_dot == -1:
        return ip
    return ip[: last_dot + 1] + "255"


def _send(pm: PacketManager, dest: str, port: int, hostname: str, interfaces: list[str]) -> None:
    try:
        pm.send_hello(dest, port, hostname, interfaces)
    except ValueError as exc:
        print(exc, file=sys.stderr)
    except OSError as exc:
        print(f"sendto: {exc}", file=sys.stderr)


def _receive(pm: PacketManager, port: int, lsm: LinkStateManager,
             running: threading.Event, hostname: str) -> None:
    print(f"Starting receiver thread on port {port}")
    try:
        pm.receive_packets(port, lsm, running, hostname)
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)


def main(argv=None) -> int:
    """Run the router named by the first argument until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    router_id = args[0] if args else DEFAULT_ROUTER_ID
    print(f"Starting router: {router_id}")

    config = get_router_config(router_id, CONFIG_FILE)
    if not config.hostname or not config.interfaces:
        print(f"Invalid configuration for router: {router_id}", file=sys.stderr)
        return 1

    hostname = config.hostname
    interfaces = config.interfaces
    port = config.port

    print(f"Hostname: {hostname}")
    print("Interfaces:")
    for iface in interfaces:
        print(f"  {iface}")
    print(f"Port: {port}")

    lsm = LinkStateManager()
    pm = PacketManager()
    running = threading.Event()
    running.set()
    receiver = threading.Thread(
        target=_receive, args=(pm, port, lsm, running, hostname), daemon=True
    )
    receiver.start()

    try:
        while True:
            for iface in interfaces:
                broadcast = calculate_broadcast_address(iface)
                print(f"Sending HELLO to broadcast address: {broadcast}")
                _send(pm, broadcast, port, hostname, interfaces)
            for neighbor in lsm.active_neighbors():
                _send(pm, neighbor, port, hostname, interfaces)
            lsm.purge_inactive_neighbors()
            print("Active neighbors: " + "".join(f"{n} " for n in lsm.active_neighbors()))
            time.sleep(HELLO_INTERVAL)
    except KeyboardInterrupt:
        pass
    finally:
        running.clear()
        receiver.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())