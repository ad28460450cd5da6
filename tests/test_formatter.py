import json
from ipaddress import IPv4Address, IPv6Address

from minitcpdump.formatter import OutputFormat, format_compact, format_json, render
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
TCP_PACKET = ParsedPacket(ETH, V4, TcpInfo(1234, 80, b"hello"))


def test_compact_tcp_line():
    assert format_compact(TCP_PACKET) == (
        "02:00:00:00:00:01 > 02:00:00:00:00:02 | 10.0.0.1 > 10.0.0.2 | TCP:1234>80 (5 bytes)"
    )


def test_compact_ipv6_udp_line():
    packet = ParsedPacket(
        ETH, Ipv6Info(IPv6Address("fd00::1"), IPv6Address("fd00::2")), UdpInfo(5353, 53, b"")
    )
    parts = format_compact(packet).split(" | ")
    assert parts[1:] == ["fd00::1 > fd00::2", "UDP:5353>53 (0 bytes)"]


def test_compact_unknown_layers():
    packet = ParsedPacket(ETH, UnknownNetwork(), UnknownTransport())
    assert format_compact(packet).split(" | ")[1:] == ["Unknown IP", "Unknown Transport"]


def test_compact_omits_missing_layers():
    assert format_compact(ParsedPacket(ETH)) == "02:00:00:00:00:01 > 02:00:00:00:00:02"


def test_json_round_trip():
    text = format_json(TCP_PACKET)
    assert "\n" not in text
    assert json.loads(text) == TCP_PACKET.to_dict()


def test_json_unknown_variants_are_strings():
    decoded = json.loads(format_json(ParsedPacket(ETH, UnknownNetwork(), UnknownTransport())))
    assert decoded["network"] == "Unknown"
    assert decoded["transport"] == "Unknown"


def test_render_chooses_format():
    assert render(TCP_PACKET, OutputFormat.JSON) == format_json(TCP_PACKET)
    assert render(TCP_PACKET, OutputFormat.COMPACT) == format_compact(TCP_PACKET)
    assert render(TCP_PACKET, None) == format_compact(TCP_PACKET)
    assert render(TCP_PACKET, "json") == format_json(TCP_PACKET)