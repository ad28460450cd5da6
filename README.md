# minitcpdump

A small command-line packet sniffer. It reads raw Ethernet frames from a
network interface, decodes the Ethernet, IPv4/IPv6 and TCP/UDP headers, and
prints one line for every packet that passes the filters you give.

It has no dependencies beyond the Python standard library (Python 3.10 or
later).

## Installing

```
pip install .
```

Capturing uses a raw `AF_PACKET` socket, so it needs a Linux host and usually
root privileges (or the `CAP_NET_RAW` capability). On a system without
`AF_PACKET` the command reports an error and exits.

## Usage

```
minitcpdump --interface eth0
```

Options:

| Option | Meaning |
| --- | --- |
| `-i`, `--interface NAME` | Interface to listen on (required) |
| `-p`, `--protocol {tcp,udp,http}` | Only TCP or only UDP packets; `http` selects TCP packets |
| `--src-port PORT` | Only packets from this TCP/UDP source port |
| `--dst-port PORT` | Only packets to this TCP/UDP destination port |
| `--src-host ADDR` | Only packets from this IPv4 or IPv6 address |
| `--dst-host ADDR` | Only packets to this IPv4 or IPv6 address |
| `--format {json,compact}` | Output format, `compact` by default |
| `--port PORT` | Accepted and checked as a port number, but not used as a filter |

Ports must be between 0 and 65535 and hosts must be valid IP addresses;
otherwise the command prints a usage error.

Every filter given must match for a packet to be printed. A port filter never
matches a packet without a TCP or UDP layer, and a host filter never matches a
packet without an IPv4 or IPv6 layer.

The command runs until interrupted. It exits with status 1 when the interface
does not exist or the capture socket cannot be opened, and with status 130 on
Ctrl-C. Errors while reading a frame are printed to standard error and capture
carries on.

### Examples

Show DNS replies arriving over UDP:

```
minitcpdump -i eth0 -p udp --src-port 53
```

Show traffic to one host as JSON:

```
minitcpdump -i eth0 --dst-host 192.0.2.10 --format json
```

### Output

Compact output joins the layers with ` | `: source and destination MAC,
source and destination IP, then the transport with its payload size:

```
02:00:00:00:00:01 > 02:00:00:00:00:02 | 192.0.2.1 > 192.0.2.2 | TCP:40000>80 (0 bytes)
```

A frame that is neither IPv4 nor IPv6 shows `Unknown IP | Unknown Transport`;
an IP packet carrying something other than TCP or UDP shows
`Unknown Transport`. When the TCP or UDP header is cut short, the transport
part is left out.

JSON output is one document per line, for example:

```
{"ethernet":{"src_mac":"02:00:00:00:00:01","dest_mac":"02:00:00:00:00:02"},"network":{"Ipv4":{"src":"192.0.2.1","dest":"192.0.2.2"}},"transport":{"Udp":{"src_port":53,"dest_port":40000,"payload":[1,2]}}}
```

Unknown layers appear as the string `"Unknown"`, a missing transport as
`null`, and payloads as lists of byte values.

## Using it as a library

```python
from minitcpdump.parser import parse
from minitcpdump.filter import PacketFilter, Protocol
from minitcpdump.formatter import OutputFormat, render

packet = parse(frame_bytes)
if packet is not None and PacketFilter(protocol=Protocol.TCP).matches(packet):
    print(render(packet, OutputFormat.JSON))
```

- `minitcpdump.parser.parse(frame)` decodes an Ethernet frame into a
  `ParsedPacket`, or returns `None` when the Ethernet or IP header is
  truncated. `parse_ipv4`, `parse_ipv6`, `parse_tcp` and `parse_udp` decode the
  single layers.
- `minitcpdump.model` holds the layer classes: `EthernetInfo`, `Ipv4Info`,
  `Ipv6Info`, `UnknownNetwork`, `TcpInfo`, `UdpInfo`, `UnknownTransport` and
  `ParsedPacket`, each with a `to_dict()` method, plus `format_mac`.
- `minitcpdump.filter.PacketFilter` holds the criteria (`protocol`,
  `src_port`, `dest_port`, `src_host`, `dest_host`); `PacketFilter.from_args`
  builds one from parsed command-line options.
- `minitcpdump.formatter` offers `format_compact`, `format_json` and
  `render(packet, output_format)`, which uses compact output when no format is
  given.
- `minitcpdump.sniffer.sniff(interface, callback)` opens the interface and
  calls `callback` with every parsed packet until it is interrupted. It raises
  `LookupError` for an unknown interface.

## What it does not do

It only captures live traffic: it does not read or write capture files, has
no filter expression language beyond the options above, and does not decode
anything above TCP and UDP (`--protocol http` only selects TCP packets).

## Running the tests

```
pip install .[test]
pytest
```