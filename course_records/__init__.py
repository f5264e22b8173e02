"""Course records service: courses and per-semester grade datasets over HTTP."""

__version__ = "0.1.0"
