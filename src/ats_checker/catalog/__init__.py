"""Bundled job role catalog."""

from ats_checker.catalog.loader import RoleCatalog, default_catalog, load_catalog

__all__ = ["RoleCatalog", "default_catalog", "load_catalog"]
