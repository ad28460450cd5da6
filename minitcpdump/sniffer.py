"""Live capture of Ethernet frames from a network interface."""

from __future__ import annotations

import contextlib
import errno
import socket
import sys
from typing import Callable

from .model import ParsedPacket
from .parser import parse

_ETH_P_ALL = 0x0003
_MAX_FRAME = 65535


def sniff(interface: str, callback: Callable[[ParsedPacket], None]) -> None:
    """Capture frames on interface forever, passing each decoded one to callback."""
    names = {name for _, name in socket.if_nameindex()}
    if interface not in names:
        raise LookupError(f"Interface '{interface}' not found")

    family = getattr(socket, "AF_PACKET", None)
    if family is None:
        raise OSError(errno.EOPNOTSUPP, "Only Ethernet interfaces are supported")

    raw = socket.socket(family, socket.SOCK_RAW, socket.htons(_ETH_P_ALL))
    with contextlib.closing(raw) as sock:
        sock.bind((interface, 0))
        while True:
            try:
                frame = sock.recv(_MAX_FRAME)
            except OSError as exc:
                print(f"Error reading packet: {exc}", file=sys.stderr)
                continue
            packet = parse(frame)
            if packet is not None:
                callback(packet)