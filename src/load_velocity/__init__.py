"""Per-customer fund load velocity limits over an ordered event stream."""

__version__ = "0.1.0"
