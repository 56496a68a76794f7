"""Probe packet construction."""

from __future__ import annotations

import struct

ICMP_ECHO = 8
ICMP_HEADER_LEN = 8
ICMP_PAYLOAD_LEN = 24
ICMP_PACKET_SIZE = ICMP_HEADER_LEN + ICMP_PAYLOAD_LEN
UDP_PAYLOAD_LEN = 9


def checksum(data: bytes) -> int:
    """Internet checksum of ``data``, to be written in network byte order."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def build_udp_payload() -> bytes:
    """Payload of a UDP probe: the byte values 0 to 8."""
    return bytes(range(UDP_PAYLOAD_LEN))


def build_icmp_echo(ident: int, sequence: int) -> bytes:
    """ICMP echo request with the given identifier and sequence number."""
    payload = bytes(range(ICMP_HEADER_LEN, ICMP_HEADER_LEN + ICMP_PAYLOAD_LEN))
    ident &= 0xFFFF
    sequence &= 0xFFFF
    header = struct.pack("!BBHHH", ICMP_ECHO, 0, 0, ident, sequence)
    cksum = checksum(header + payload)
    return struct.pack("!BBHHH", ICMP_ECHO, 0, cksum, ident, sequence) + payload


def udp_port(base_port: int, ttl: int) -> int:
    """Destination port for a UDP probe sent with ``ttl``."""
    return (base_port + ttl - 1) & 0xFFFF