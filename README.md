# pytraceroute

Building blocks for a traceroute tool. The package parses traceroute command lines, builds
UDP and ICMP probe packets, and formats the header line and the per-hop output lines. It also
has a few small helpers for characters, byte buffers, strings, printf-style formatting and
linked lists.

## Installation

```
pip install .
```

## Parsing a command line

`pytraceroute.options.parse_args` takes the arguments that follow the program name and
returns a frozen `Options` dataclass:

```python
from pytraceroute.options import Method, parse_args

options = parse_args(["-M", "icmp", "-q", "2", "example.com"])
assert options.method is Method.ICMP
assert options.probes == 2
assert options.max_hops == 64
```

Options understood:

| Option                | Field               | Meaning                                            |
|-----------------------|---------------------|----------------------------------------------------|
| `-m NUM`              | `max_hops`          | maximal hop count, 1–255 (default: 64)             |
| `-M METHOD`           | `method`            | `icmp` or `udp` (default: `udp`)                   |
| `-p PORT`             | `port`              | base destination port, 1–65536 (default: 33434)    |
| `-q NUM`              | `probes`            | probes per hop, 1–10 (default: 3)                  |
| `-t NUM`              | `tos`               | type of service, 0–255, decimal, octal or `0x` hex |
| `-w NUM`              | `wait`              | seconds to wait for a reply, 0–60 (default: 3)     |
| `--resolve-hostnames` | `resolve_hostnames` | show the host name of each hop                     |
| `--help`              |                     | help listing                                       |
| `--usage`             |                     | short usage message                                |
| `-V`                  |                     | version banner                                     |

Long options can be shortened to any unambiguous prefix.

An invalid command line raises `OptionError`. Its `message` holds the error text, and when
`show_hint` is true a pointer to `--help` belongs after it. `exit_status` is 1. A request
for `--help`, `--usage` or `-V` raises `InfoRequest`. Its `text` holds the text to print,
and its `exit_status` is 0. The single-option validators are available on their own too:
`parse_hops`, `parse_method`, `parse_port`, `parse_probes`, `parse_tos` and `parse_wait`. So
are the texts: `help_text`, `usage_text` and `version_text`.

## Probe packets

`pytraceroute.packets`:

- `checksum(data)`: the Internet checksum of `data`.
- `build_udp_payload()`: the 9-byte UDP probe payload, bytes 0 to 8.
- `build_icmp_echo(ident, sequence)`: a 32-byte ICMP echo request with its checksum filled in.
- `udp_port(base_port, ttl)`: the destination port for the UDP probe sent with `ttl`, which is `base_port + ttl - 1`.

## Output lines

`pytraceroute.report`:

```python
from pytraceroute.report import HopFormatter, ProbeResult, format_header

print(format_header("example.com", "93.184.215.14", 64), end="")

hop = HopFormatter(probes=2)
line = hop.start(1)
line += hop.probe(0, ProbeResult("10.0.0.1", 56, 0.512))
line += hop.probe(1, ProbeResult("10.0.0.1", 56, 0.430))
print(line, end="")
#   1   10.0.0.1  0.512 ms  0.430 ms
```

A hop line names an address when it first answers, and again whenever a later probe on the
same hop is answered from a different address. A probe with no answer, `ProbeResult.timeout()`,
is shown as `*`. The line ends after the last probe. With `resolve_hostnames=True`, each address
shown is followed by its host name in parentheses. The name comes from a reverse DNS lookup,
or from the `resolver` callable you pass in.

## Helpers

- `pytraceroute.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`, `atoi`, `itoa` and `digit_count`.
- `pytraceroute.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc`, which work on `bytes` and `bytearray`.
- `pytraceroute.strings`: `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
- `pytraceroute.formatting`: `format_string(fmt, *args)` supports `%c %s %d %i %u %T %p %x %X %%`. There are also `format_address(pointer)` and `printf_to(stream, fmt, *args)`. A missing format, a trailing lone `%` or a missing argument raises `FormatError`.
- `pytraceroute.linked`: `LinkedList`, a singly linked list of `Node`s. It offers `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and `map`.

## What this package does not do

The package opens no sockets. It does not send probes, wait for replies or time them, and it
installs no command-line program. It parses options, builds packets and formats output, but it
does not run a trace. The code that sends the packets and feeds the answers to `HopFormatter`
has to come from elsewhere.