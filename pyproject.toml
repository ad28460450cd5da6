[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitcpdump"
version = "0.1.0"
description = "A small packet sniffer that decodes Ethernet, IP, TCP and UDP headers and prints matching packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["sniffer", "packet", "capture", "ethernet", "ipv4", "ipv6", "tcp", "udp", "network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
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

[project.scripts]
minitcpdump = "minitcpdump.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minitcpdump"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
