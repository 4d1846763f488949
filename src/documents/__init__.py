"""Documents layer: JSON-file document store + listing index."""

from .store import DocumentStore

__all__ = ["DocumentStore"]
