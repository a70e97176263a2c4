"""remotectl — remote controller for simulated home devices."""

__version__ = "0.1.0"
