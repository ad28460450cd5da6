"""Decoding of raw Ethernet frames into packet layers."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Optional

from .model import (
    EthernetInfo,
    Ipv4Info,
    Ipv6Info,
    Network,
    ParsedPacket,
    TcpInfo,
    Transport,
    UdpInfo,
    UnknownNetwork,
    UnknownTransport,
    format_mac,
)

ETHERTYPE_IPV4 = 0x0800
ETHERTYPE_IPV6 = 0x86DD
IPPROTO_TCP = 6
IPPROTO_UDP = 17

_ETHERNET_HEADER = 14
_IPV4_MIN_HEADER = 20
_IPV6_HEADER = 40
_TCP_MIN_HEADER = 20
_UDP_HEADER = 8


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "big")


def _payload(data: bytes, start: int, length: Optional[int] = None) -> bytes:
    """Cut a payload out of data, clipped to what was actually captured."""
    start = min(start, len(data))
    if length is None:
        return bytes(data[start:])
    return bytes(data[start:min(start + length, len(data))])


def _transport(protocol: int, payload: bytes) -> Optional[Transport]:
    if protocol == IPPROTO_TCP:
        return parse_tcp(payload)
    if protocol == IPPROTO_UDP:
        return parse_udp(payload)
    return UnknownTransport()


def parse(frame: bytes) -> Optional[ParsedPacket]:
    """Decode an Ethernet frame; None when a header is truncated."""
    frame = bytes(frame)
    if len(frame) < _ETHERNET_HEADER:
        return None

    ethernet = EthernetInfo(src_mac=format_mac(frame[6:12]), dest_mac=format_mac(frame[0:6]))
    ethertype = _u16(frame, 12)
    body = frame[_ETHERNET_HEADER:]

    network: Network
    transport: Optional[Transport]
    if ethertype == ETHERTYPE_IPV4:
        if len(body) < _IPV4_MIN_HEADER:
            return None
        network = Ipv4Info(IPv4Address(body[12:16]), IPv4Address(body[16:20]))
        transport = parse_ipv4(body)
    elif ethertype == ETHERTYPE_IPV6:
        if len(body) < _IPV6_HEADER:
            return None
        network = Ipv6Info(IPv6Address(body[8:24]), IPv6Address(body[24:40]))
        transport = parse_ipv6(body)
    else:
        network = UnknownNetwork()
        transport = UnknownTransport()

    return ParsedPacket(ethernet=ethernet, network=network, transport=transport)


def parse_ipv4(data: bytes) -> Optional[Transport]:
    """Decode the transport layer carried by an IPv4 packet."""
    if len(data) < _IPV4_MIN_HEADER:
        return None
    header_length = (data[0] & 0x0F) * 4
    payload_length = max(_u16(data, 2) - header_length, 0)
    payload = _payload(data, max(header_length, _IPV4_MIN_HEADER), payload_length)
    return _transport(data[9], payload)


def parse_ipv6(data: bytes) -> Optional[Transport]:
    """Decode the transport layer carried by an IPv6 packet."""
    if len(data) < _IPV6_HEADER:
        return None
    payload = _payload(data, _IPV6_HEADER, _u16(data, 4))
    return _transport(data[6], payload)


def parse_tcp(data: bytes) -> Optional[TcpInfo]:
    """Decode a TCP segment; None when the header is truncated."""
    if len(data) < _TCP_MIN_HEADER:
        return None
    data_offset = (data[12] >> 4) * 4
    return TcpInfo(
        source_port=_u16(data, 0),
        destination_port=_u16(data, 2),
        payload=_payload(data, max(data_offset, _TCP_MIN_HEADER)),
    )


def parse_udp(data: bytes) -> Optional[UdpInfo]:
    """Decode a UDP datagram; None when the header is truncated."""
    if len(data) < _UDP_HEADER:
        return None
    payload_length = max(_u16(data, 4) - _UDP_HEADER, 0)
    return UdpInfo(
        source_port=_u16(data, 0),
        destination_port=_u16(data, 2),
        payload=_payload(data, _UDP_HEADER, payload_length),
    )