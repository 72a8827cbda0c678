"""Conversions to and from other graph libraries (optional dependencies)."""
