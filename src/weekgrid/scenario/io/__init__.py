"""Schedule document IO helpers."""

from .loaders import load_document, parse_document

__all__ = ["load_document", "parse_document"]
