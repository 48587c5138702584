"""Wire-format types for DTLS: content and curve types, block padding and hello extensions."""

__version__ = "0.1.0"
__all__ = ["content", "curve", "errors", "extensions", "padding"]