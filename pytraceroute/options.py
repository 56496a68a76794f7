"""Command-line option parsing for the traceroute tool."""

from __future__ import annotations

import enum
import re
import string
from dataclasses import dataclass
from typing import Sequence

PROG = "pytraceroute"
HINT = f"Try '{PROG} --help' or '{PROG} --usage' for more information."

DEFAULT_HOPS = 64
DEFAULT_PORT = 33434
DEFAULT_PROBES = 3
DEFAULT_WAIT = 3
MAX_PROBES = 10

_DIGITS = "0123456789"
_ATOL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_ARG_OPTIONS = "mpqtwM"
_LONG_OPTIONS = ("usage", "help", "resolve-hostnames")


class Method(enum.Enum):
    """Kind of probe packet sent to each hop."""

    ICMP = "icmp"
    UDP = "udp"


@dataclass(frozen=True)
class Options:
    """Settings for one traceroute run."""

    host: str
    max_hops: int = DEFAULT_HOPS
    port: int = DEFAULT_PORT
    probes: int = DEFAULT_PROBES
    tos: int | None = None
    wait: int = DEFAULT_WAIT
    resolve_hostnames: bool = False
    method: Method = Method.UDP


class OptionError(Exception):
    """Invalid command line; the program exits with status 1."""

    exit_status = 1

    def __init__(self, message: str, show_hint: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.show_hint = show_hint


class InfoRequest(Exception):
    """The command line asked for help, usage or version text; exit status 0."""

    exit_status = 0

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


def _atol(text: str) -> int:
    match = _ATOL.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _all_digits(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def parse_hops(value: str) -> int:
    """Validate the maximal hop count (1 to 255)."""
    number = _atol(value)
    if number < 1 or number > 255 or len(value) > 3 or not _all_digits(value):
        raise OptionError(f"{PROG}: invalid hops value '{value}'")
    return number


def parse_method(value: str) -> Method:
    """Return the probe method named by ``value``."""
    for method in Method:
        if value == method.value:
            return method
    raise OptionError(f"{PROG}: invalid method", show_hint=True)


def parse_port(value: str) -> int:
    """Validate the base destination port (1 to 65536)."""
    number = _atol(value)
    if number <= 0 or number >= 65537 or len(value) > 5:
        raise OptionError(f"{PROG}: invalid port number `{value}'")
    if not _all_digits(value):
        raise OptionError(f"{PROG}: ridiculous waiting time `{value}'")
    return number


def parse_probes(value: str) -> int:
    """Validate the number of probes per hop (1 to 10)."""
    number = _atol(value)
    if (
        number < 1
        or number > MAX_PROBES
        or len(value) > 3
        or not _all_digits(value)
    ):
        raise OptionError(f"{PROG}: number of tries should be between 1 and 10")
    return number


def _strtol_auto(text: str) -> tuple[int, str]:
    """Parse ``text`` with automatic base detection; return value and leftover."""
    if text[:2] in ("0x", "0X") and len(text) > 2 and text[2] in string.hexdigits:
        return int(text[2:], 16), ""
    if text.startswith("0"):
        match = re.match(r"[0-7]*", text)
        return int(match.group(), 8), text[match.end():]
    if not text:
        return 0, ""
    return int(text), ""


def parse_tos(value: str) -> int:
    """Validate a type-of-service value, decimal, octal or hexadecimal (0 to 255)."""
    hex_prefix = value[:2] in ("0x", "0X")
    for index, ch in enumerate(value):
        if ch in _DIGITS:
            continue
        if hex_prefix and (index == 1 or ch in string.hexdigits):
            continue
        raise OptionError(f"{PROG}: invalid TOS value '{value}'")
    number, rest = _strtol_auto(value)
    if rest or number < 0 or number > 255:
        raise OptionError(f"{PROG}: invalid TOS value '{value}'")
    return number


def parse_wait(value: str) -> int:
    """Validate the response wait time in seconds (0 to 60)."""
    number = _atol(value)
    if number < 0 or number > 60 or len(value) > 2 or not _all_digits(value):
        raise OptionError(f"{PROG}: ridiculous waiting time `{value}'")
    return number


def usage_text() -> str:
    """Short usage message."""
    return (
        f"Usage: {PROG} [-V] [-m NUM] [-M METHOD] [-p PORT] [-q NUM] [-t NUM]\n"
        "                 [-w NUM] [--resolve-hostnames] [--help] [--usage]\n"
    )


def _option_line(short: str, long: str, message: str) -> str:
    return f"  {short:<4} {long:<21} {message}\n"


def help_text() -> str:
    """Full help listing."""
    lines = [
        f"Usage: {PROG} [OPTION...] HOST\n",
        "Print the route packets trace to network host.\n",
        "\n",
        _option_line("-m,", "", "set maximal hop count (default: 64)"),
        _option_line("-M,", "", "use METHOD (`icmp' or `udp') for traceroute"),
        _option_line("", "", "operations, defaulting to `udp'"),
        _option_line("-p,", "", "use destination PORT port (default: 33434)"),
        _option_line("", "--resolve-hostnames", "resolve hostnames"),
        _option_line("-q,", "", "send NUM probe packets per hop (default: 3)"),
        _option_line("-t,", "", "set type of service (TOS) to NUM"),
        _option_line("-w,", "", "wait NUM seconds for response (default: 3)"),
        _option_line("", "--help", "give this help list"),
        _option_line("", "--usage", "give a short usage message"),
        _option_line("-V,", "", "print program version"),
    ]
    return "".join(lines)


def version_text() -> str:
    """Version banner."""
    return (
        f"{PROG} version 1.0 \n"
        "inspired by traceroute (GNU inetutils) 2.0\n"
    )


def _long_option(arg: str, settings: dict) -> None:
    name, has_value, _ = arg[2:].partition("=")
    if name in _LONG_OPTIONS:
        candidates = [name]
    else:
        candidates = [opt for opt in _LONG_OPTIONS if opt.startswith(name)]
    if not candidates:
        raise OptionError(f"{PROG}: unrecognized option '{arg}'", show_hint=True)
    if len(candidates) > 1:
        raise OptionError(f"{PROG}: option '{arg}' is ambiguous", show_hint=True)
    full = candidates[0]
    if has_value:
        raise OptionError(
            f"{PROG}: option '--{full}' doesn't allow an argument", show_hint=True
        )
    if full == "usage":
        raise InfoRequest(usage_text())
    if full == "help":
        raise InfoRequest(help_text())
    settings["resolve_hostnames"] = True


_PARSERS = {
    "m": ("max_hops", parse_hops),
    "M": ("method", parse_method),
    "p": ("port", parse_port),
    "q": ("probes", parse_probes),
    "t": ("tos", parse_tos),
    "w": ("wait", parse_wait),
}


def parse_args(argv: Sequence[str]) -> Options:
    """Parse command-line arguments (without the program name) into Options."""
    args = list(argv)
    if not args:
        raise OptionError(f"{PROG}: missing host operand", show_hint=True)

    settings: dict = {}
    operands: list[str] = []
    queue = iter(args)
    for arg in queue:
        if arg == "--":
            operands.extend(queue)
            break
        if arg.startswith("--"):
            _long_option(arg, settings)
            continue
        if not arg.startswith("-") or arg == "-":
            operands.append(arg)
            continue
        cluster = arg[1:]
        for position, ch in enumerate(cluster):
            if ch in _ARG_OPTIONS:
                value = cluster[position + 1:]
                if not value:
                    value = next(queue, None)
                    if value is None:
                        raise OptionError(
                            f"{PROG}: option requires an argument -- '{ch}'",
                            show_hint=True,
                        )
                field, parser = _PARSERS[ch]
                settings[field] = parser(value)
                break
            if ch == "V":
                raise InfoRequest(version_text())
            if ch == " ":
                continue
            raise OptionError(f"{PROG}: invalid option -- '{ch}'", show_hint=True)

    if not operands:
        raise OptionError("Error: missing host operand")
    return Options(host=operands[0], **settings)