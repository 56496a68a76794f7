[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pytraceroute"
version = "1.0.0"
description = "Building blocks for a traceroute tool: option parsing, probe packets and hop output formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["traceroute", "network", "icmp", "udp", "checksum", "diagnostics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pytraceroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
