"""Now-playing capture for radio stations without a public API."""

__version__ = "0.1.0"
