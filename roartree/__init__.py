"""Compressed sets of unsigned 64-bit integers built from sorted 32-bit partitions."""

__version__ = "0.1.0"
__all__ = ["core", "treemap", "util"]