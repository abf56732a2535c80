"""Course and category dashboard backed by the Living Apps record store."""

__version__ = "0.1.0"
