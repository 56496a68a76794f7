"""Traceroute building blocks: option parsing, probe packets, output formatting and small helpers."""

__version__ = "1.0.0"