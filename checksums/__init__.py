"""Tool for making/verifying checksums of directory trees."""

__version__ = "0.7.0"
