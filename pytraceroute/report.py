"""Formatting of traceroute output lines."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Callable, Optional

Resolver = Callable[[str], Optional[str]]


def format_header(hostname: str, ip: str, max_hops: int) -> str:
    """First line printed before tracing."""
    return f"traceroute to {hostname} ({ip}), {max_hops} hops max\n"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe: who answered, how many bytes, and the round trip."""

    address: str | None = None
    size: int = -1
    elapsed_ms: float = 0.0

    @classmethod
    def timeout(cls) -> "ProbeResult":
        """A probe that got no answer."""
        return cls()

    @property
    def timed_out(self) -> bool:
        return self.size < 0


def _reverse_lookup(ip: str) -> str | None:
    try:
        return socket.gethostbyaddr(ip)[0]
    except OSError:
        return None


class HopFormatter:
    """Builds the text of one hop line, probe by probe."""

    def __init__(
        self,
        probes: int,
        resolve_hostnames: bool = False,
        resolver: Resolver | None = None,
    ) -> None:
        self.probes = probes
        self.resolve_hostnames = resolve_hostnames
        self._resolver = resolver if resolver is not None else _reverse_lookup
        self._last: str | None = None

    def start(self, ttl: int) -> str:
        """Text that opens the line for hop ``ttl``."""
        self._last = None
        return f" {ttl:2d} "

    def probe(self, index: int, result: ProbeResult) -> str:
        """Text for probe ``index`` of the current hop."""
        parts = []
        address = result.address
        if address is not None:
            first = self._last is None and result.size >= 0
            changed = self._last is not None and address != self._last
            if first or changed:
                parts.append(f"  {address}")
                if self.resolve_hostnames:
                    host = self._resolver(address) or address
                    parts.append(f" ({host})")
                self._last = address

        if result.size < 0:
            parts.append("  *")
        elif result.size > 0:
            parts.append(f"  {result.elapsed_ms:.3f} ms")

        if index == self.probes - 1:
            parts.append("\n")
            self._last = None
        return "".join(parts)