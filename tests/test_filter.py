from argparse import Namespace
from ipaddress import IPv4Address, IPv6Address

import pytest

from minitcpdump.filter import PacketFilter, Protocol
from minitcpdump.model import (
    EthernetInfo,
    Ipv4Info,
    Ipv6Info,
    ParsedPacket,
    TcpInfo,
    UdpInfo,
    UnknownNetwork,
    UnknownTransport,
)

ETH = EthernetInfo("02:00:00:00:00:01", "02:00:00:00:00:02")
V4 = Ipv4Info(IPv4Address("10.0.0.1"), IPv4Address("10.0.0.2"))


def packet(network=V4, transport=None):
    return ParsedPacket(ETH, network, transport)


TCP_PACKET = packet(transport=TcpInfo(1234, 80, b""))
UDP_PACKET = packet(transport=UdpInfo(5353, 53, b""))
UNKNOWN_PACKET = packet(UnknownNetwork(), UnknownTransport())


def test_empty_filter_matches_everything():
    flt = PacketFilter()
    assert all(flt.matches(p) for p in (TCP_PACKET, UDP_PACKET, UNKNOWN_PACKET, packet(None)))


@pytest.mark.parametrize(
    "protocol, expected",
    [
        (Protocol.TCP, [True, False, False]),
        (Protocol.UDP, [False, True, False]),
        (Protocol.HTTP, [True, False, False]),
    ],
)
def test_protocol_selection(protocol, expected):
    flt = PacketFilter(protocol=protocol)
    assert [flt.matches(p) for p in (TCP_PACKET, UDP_PACKET, UNKNOWN_PACKET)] == expected


def test_port_filters():
    assert PacketFilter(dest_port=80).matches(TCP_PACKET)
    assert not PacketFilter(dest_port=80).matches(UDP_PACKET)
    assert PacketFilter(src_port=5353).matches(UDP_PACKET)
    assert not PacketFilter(src_port=5353).matches(UNKNOWN_PACKET)
    assert not PacketFilter(src_port=1234).matches(packet(transport=None))


def test_host_filters():
    assert PacketFilter(src_host=IPv4Address("10.0.0.1")).matches(TCP_PACKET)
    assert not PacketFilter(src_host=IPv4Address("10.0.0.2")).matches(TCP_PACKET)
    assert PacketFilter(dest_host=IPv4Address("10.0.0.2")).matches(TCP_PACKET)
    assert not PacketFilter(dest_host=IPv4Address("10.0.0.2")).matches(UNKNOWN_PACKET)
    assert not PacketFilter(dest_host=IPv4Address("10.0.0.2")).matches(packet(None))


def test_ipv6_host_does_not_match_ipv4_packet():
    v6 = packet(Ipv6Info(IPv6Address("fd00::1"), IPv6Address("fd00::2")))
    flt = PacketFilter(src_host=IPv6Address("fd00::1"))
    assert flt.matches(v6)
    assert not flt.matches(TCP_PACKET)


def test_all_criteria_must_hold():
    flt = PacketFilter(protocol=Protocol.TCP, dest_port=80, src_port=9999)
    assert not flt.matches(TCP_PACKET)


def test_from_args_converts_values():
    args = Namespace(
        protocol="udp", port=None, src_port=5353, dest_port=53,
        src_host="10.0.0.1", dest_host=IPv4Address("10.0.0.2"),
    )
    flt = PacketFilter.from_args(args)
    assert flt == PacketFilter(
        protocol=Protocol.UDP, src_port=5353, dest_port=53,
        src_host=IPv4Address("10.0.0.1"), dest_host=IPv4Address("10.0.0.2"),
    )
    assert flt.matches(UDP_PACKET)


def test_from_args_with_missing_options():
    assert PacketFilter.from_args(Namespace(interface="eth0")) == PacketFilter()