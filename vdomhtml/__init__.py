"""Byte strings, scanning helpers, attributes and CSS-style query selectors for HTML."""

__version__ = "0.1.0"