"""Capture Ethernet frames, decode their IP and TCP/UDP layers, filter and print them."""

__version__ = "0.1.0"
__all__ = ["__version__"]