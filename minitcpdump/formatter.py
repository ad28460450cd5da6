"""Rendering of decoded packets as text."""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from .model import (
    Ipv4Info,
    Ipv6Info,
    ParsedPacket,
    TcpInfo,
    UdpInfo,
    UnknownNetwork,
    UnknownTransport,
)


class OutputFormat(Enum):
    """Available output styles."""

    JSON = "json"
    COMPACT = "compact"


def format_compact(packet: ParsedPacket) -> str:
    """One line with the layers separated by ' | '."""
    parts = [f"{packet.ethernet.src_mac} > {packet.ethernet.dest_mac}"]

    network = packet.network
    if isinstance(network, (Ipv4Info, Ipv6Info)):
        parts.append(f"{network.src} > {network.dest}")
    elif isinstance(network, UnknownNetwork):
        parts.append("Unknown IP")

    transport = packet.transport
    if isinstance(transport, TcpInfo):
        parts.append(
            f"TCP:{transport.src_port()}>{transport.dst_port()} ({len(transport.payload)} bytes)"
        )
    elif isinstance(transport, UdpInfo):
        parts.append(
            f"UDP:{transport.src_port()}>{transport.dst_port()} ({len(transport.payload)} bytes)"
        )
    elif isinstance(transport, UnknownTransport):
        parts.append("Unknown Transport")

    return " | ".join(parts)


def format_json(packet: ParsedPacket) -> str:
    """The packet as a single-line JSON document."""
    return json.dumps(packet.to_dict(), separators=(",", ":"))


def render(packet: ParsedPacket, output_format: Optional[OutputFormat] = None) -> str:
    """Render in the chosen format, compact when none is given."""
    if output_format is not None and OutputFormat(output_format) is OutputFormat.JSON:
        return format_json(packet)
    return format_compact(packet)