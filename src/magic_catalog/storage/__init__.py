"""Persistence encoding for spell catalogs."""

from .codec import FORMAT_VERSION, MAGIC, decode_groups, encode_groups

__all__ = ["FORMAT_VERSION", "MAGIC", "decode_groups", "encode_groups"]
