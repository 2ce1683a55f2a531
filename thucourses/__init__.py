"""Scrape department course listings and export them as CSV."""

__version__ = "0.1.0"
__all__ = ["courses", "crawler"]