"""LinkHub plan entitlements service."""

__version__ = "0.1.0"
