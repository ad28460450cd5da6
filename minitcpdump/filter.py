"""Selection of packets by protocol, port and host."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any, Optional, Union

from .model import ParsedPacket, TcpInfo, UdpInfo

IpAddress = Union[IPv4Address, IPv6Address]


class Protocol(Enum):
    """Transport protocols a filter can select."""

    TCP = "tcp"
    UDP = "udp"
    HTTP = "http"


def _optional_ip(value: Any) -> Optional[IpAddress]:
    return None if value is None else ip_address(value)


@dataclass(frozen=True)
class PacketFilter:
    """Criteria a packet must all meet; None means any."""

    protocol: Optional[Protocol] = None
    src_port: Optional[int] = None
    dest_port: Optional[int] = None
    src_host: Optional[IpAddress] = None
    dest_host: Optional[IpAddress] = None

    @classmethod
    def from_args(cls, args: Any) -> "PacketFilter":
        """Build a filter from parsed command-line options."""
        protocol = getattr(args, "protocol", None)
        return cls(
            protocol=None if protocol is None else Protocol(protocol),
            src_port=getattr(args, "src_port", None),
            dest_port=getattr(args, "dest_port", None),
            src_host=_optional_ip(getattr(args, "src_host", None)),
            dest_host=_optional_ip(getattr(args, "dest_host", None)),
        )

    def matches(self, packet: ParsedPacket) -> bool:
        return (
            self._match_protocol(packet)
            and self._match_dest_port(packet)
            and self._match_dest_host(packet)
            and self._match_src_host(packet)
            and self._match_src_port(packet)
        )

    def _match_protocol(self, packet: ParsedPacket) -> bool:
        if self.protocol is None:
            return True
        if self.protocol is Protocol.UDP:
            return isinstance(packet.transport, UdpInfo)
        return isinstance(packet.transport, TcpInfo)

    def _match_dest_port(self, packet: ParsedPacket) -> bool:
        if self.dest_port is None:
            return True
        return packet.transport is not None and packet.transport.dst_port() == self.dest_port

    def _match_src_port(self, packet: ParsedPacket) -> bool:
        if self.src_port is None:
            return True
        return packet.transport is not None and packet.transport.src_port() == self.src_port

    def _match_src_host(self, packet: ParsedPacket) -> bool:
        if self.src_host is None:
            return True
        return packet.network is not None and packet.network.src_host() == self.src_host

    def _match_dest_host(self, packet: ParsedPacket) -> bool:
        if self.dest_host is None:
            return True
        return packet.network is not None and packet.network.dst_host() == self.dest_host