"""Sending and receiving HELLO packets over UDP."""

from __future__ import annotations

import json
import socket
import threading
from typing import Iterable

from .linkstate import LinkStateManager

DEFAULT_PORT = 5000
RECV_BUFFER_SIZE = 2047
POLL_INTERVAL = 0.1


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON literal: {name}")


def build_hello(hostname: str, interfaces: Iterable[str]) -> bytes:
    """Encode a HELLO message as compact JSON with sorted keys."""
    message = {"type": "HELLO", "hostname": hostname, "interfaces": list(interfaces)}
    text = json.dumps(message, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return text.encode("utf-8")


def handle_datagram(data: bytes, sender_ip: str, lsm: LinkStateManager, hostname: str = "") -> bool:
    """Process one received datagram.

    Returns True if the datagram was a HELLO from another router and its
    sender was recorded as a neighbour.
    """
    data = data.split(b"\0", 1)[0]
    try:
        message = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError:
        print(f"Received invalid JSON: {data.decode('utf-8', errors='replace')}")
        return False

    print("Received JSON:\n" + json.dumps(message, indent=4, sort_keys=True, ensure_ascii=False))
    if not isinstance(message, dict):
        return False
    if "hostname" in message and message["hostname"] == hostname:
        return False
    if message.get("type") != "HELLO":
        return False

    lsm.update_neighbor(sender_ip)
    if "hostname" in message:
        peer = json.dumps(message["hostname"], ensure_ascii=False)
        print(f"Discovered neighbor: {peer} at {sender_ip}")
    return True


class PacketManager:
    """Sends HELLO messages and listens for those of other routers."""

    def send_hello(
        self,
        dest_ip: str,
        port: int = DEFAULT_PORT,
        hostname: str = "",
        interfaces: Iterable[str] = (),
    ) -> None:
        """Send one HELLO datagram to ``dest_ip``, broadcast allowed."""
        try:
            socket.inet_pton(socket.AF_INET, dest_ip)
        except OSError:
            raise ValueError(f"Invalid address: {dest_ip}") from None
        payload = build_hello(hostname, interfaces)
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.sendto(payload, (dest_ip, port))

    def receive_packets(
        self,
        port: int,
        lsm: LinkStateManager,
        running: threading.Event,
        hostname: str = "",
    ) -> None:
        """Listen on ``port`` and record HELLO senders while ``running`` is set."""
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(("", port))
            sock.settimeout(POLL_INTERVAL)
            print(f"Listening for packets on UDP port {port}...")
            while running.is_set():
                try:
                    data, (sender_ip, _) = sock.recvfrom(RECV_BUFFER_SIZE)
                except OSError:
                    continue
                if data:
                    handle_datagram(data, sender_ip, lsm, hostname)