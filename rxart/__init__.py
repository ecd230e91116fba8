"""rxart: content-driven prescription artwork."""

__version__ = "0.1.0"
