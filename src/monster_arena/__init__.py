"""Monster Arena: a deterministic turn-based monster combat simulator."""

__version__ = "0.1.0"
