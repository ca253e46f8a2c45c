"""Bundled demo datasets and the catalog used to resolve source items."""

from .catalog import SourceCatalog, get_catalog


__all__ = ["SourceCatalog", "get_catalog"]
