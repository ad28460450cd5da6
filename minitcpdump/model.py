"""Decoded packet layers: Ethernet, network and transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Optional, Union


def format_mac(data: bytes) -> str:
    """Format six bytes as a colon-separated lower-case MAC address."""
    if len(data) != 6:
        raise ValueError(f"a MAC address has 6 bytes, got {len(data)}")
    return ":".join(f"{byte:02x}" for byte in data)


@dataclass(frozen=True)
class EthernetInfo:
    """Source and destination hardware addresses of a frame."""

    src_mac: str
    dest_mac: str

    def to_dict(self) -> dict[str, Any]:
        return {"src_mac": self.src_mac, "dest_mac": self.dest_mac}


@dataclass(frozen=True)
class Ipv4Info:
    """Addresses of an IPv4 packet."""

    src: IPv4Address
    dest: IPv4Address

    def src_host(self) -> IPv4Address:
        return self.src

    def dst_host(self) -> IPv4Address:
        return self.dest

    def to_dict(self) -> dict[str, Any]:
        return {"Ipv4": {"src": str(self.src), "dest": str(self.dest)}}


@dataclass(frozen=True)
class Ipv6Info:
    """Addresses of an IPv6 packet."""

    src: IPv6Address
    dest: IPv6Address

    def src_host(self) -> IPv6Address:
        return self.src

    def dst_host(self) -> IPv6Address:
        return self.dest

    def to_dict(self) -> dict[str, Any]:
        return {"Ipv6": {"src": str(self.src), "dest": str(self.dest)}}


@dataclass(frozen=True)
class UnknownNetwork:
    """A network layer that is neither IPv4 nor IPv6; it carries no addresses."""

    src: Optional[IPv4Address] = field(default=None, init=False, repr=False, compare=False)
    dest: Optional[IPv4Address] = field(default=None, init=False, repr=False, compare=False)

    def src_host(self) -> Optional[IPv4Address]:
        return self.src

    def dst_host(self) -> Optional[IPv4Address]:
        return self.dest

    def to_dict(self) -> str:
        return "Unknown"


@dataclass(frozen=True)
class TcpInfo:
    """Ports and payload of a TCP segment."""

    source_port: int
    destination_port: int
    payload: bytes = b""

    def src_port(self) -> int:
        return self.source_port

    def dst_port(self) -> int:
        return self.destination_port

    def to_dict(self) -> dict[str, Any]:
        return {
            "Tcp": {
                "src_port": self.source_port,
                "dest_port": self.destination_port,
                "payload": list(self.payload),
            }
        }


@dataclass(frozen=True)
class UdpInfo:
    """Ports and payload of a UDP datagram."""

    source_port: int
    destination_port: int
    payload: bytes = b""

    def src_port(self) -> int:
        return self.source_port

    def dst_port(self) -> int:
        return self.destination_port

    def to_dict(self) -> dict[str, Any]:
        return {
            "Udp": {
                "src_port": self.source_port,
                "dest_port": self.destination_port,
                "payload": list(self.payload),
            }
        }


@dataclass(frozen=True)
class UnknownTransport:
    """A transport layer that is neither TCP nor UDP; it carries no ports."""

    source_port: Optional[int] = field(default=None, init=False, repr=False, compare=False)
    destination_port: Optional[int] = field(
        default=None, init=False, repr=False, compare=False
    )

    def src_port(self) -> Optional[int]:
        return self.source_port

    def dst_port(self) -> Optional[int]:
        return self.destination_port

    def to_dict(self) -> str:
        return "Unknown"


Network = Union[Ipv4Info, Ipv6Info, UnknownNetwork]
Transport = Union[TcpInfo, UdpInfo, UnknownTransport]


@dataclass(frozen=True)
class ParsedPacket:
    """A captured frame decoded as far as its layers allow."""

    ethernet: EthernetInfo
    network: Optional[Network] = None
    transport: Optional[Transport] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ethernet": self.ethernet.to_dict(),
            "network": None if self.network is None else self.network.to_dict(),
            "transport": None if self.transport is None else self.transport.to_dict(),
        }