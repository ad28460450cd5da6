"""Command-line entry point: capture, filter and print packets."""

from __future__ import annotations

import argparse
import sys
from ipaddress import ip_address
from typing import Optional, Sequence

from .filter import PacketFilter, Protocol
from .formatter import OutputFormat, render
from .model import ParsedPacket
from .sniffer import sniff


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}") from None
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {text!r}")
    return value


def _host(text: str):
    try:
        return ip_address(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid IP address: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minitcpdump", description="Capture and print packets from a network interface."
    )
    parser.add_argument("-i", "--interface", required=True)
    parser.add_argument("-p", "--protocol", choices=[p.value for p in Protocol])
    parser.add_argument("--port", type=_port)
    parser.add_argument("--src-port", dest="src_port", type=_port)
    parser.add_argument("--dst-port", dest="dest_port", type=_port)
    parser.add_argument("--src-host", dest="src_host", type=_host)
    parser.add_argument("--dst-host", dest="dest_host", type=_host)
    parser.add_argument("--format", choices=[f.value for f in OutputFormat])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    packet_filter = PacketFilter.from_args(args)
    output_format = None if args.format is None else OutputFormat(args.format)

    def show(packet: ParsedPacket) -> None:
        if packet_filter.matches(packet):
            print(render(packet, output_format), flush=True)

    try:
        sniff(args.interface, show)
    except (OSError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())