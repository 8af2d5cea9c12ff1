"""Classic algorithms and data structures with interactive console tools."""

__version__ = "0.1.0"