"""Building blocks for SMA Speedwire measurement, encoding and protocol tools."""

__version__ = "0.1.0"