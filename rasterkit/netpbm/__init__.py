"""Netpbm codec (P1..P6) — the I/O boundary around the engine."""

from rasterkit.netpbm.parser import decode, read
from rasterkit.netpbm.serializer import encode, save

__all__ = ["decode", "encode", "read", "save"]
