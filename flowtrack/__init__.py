"""Flowtrack API - flow session and wearable metrics backend."""

__version__ = "0.1.0"
