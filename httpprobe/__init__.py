"""HTTP request and transfer-trace tools: ``client`` sends requests, ``debug`` traces them."""

__version__ = "1.0.0"
__all__ = ["client", "debug"]