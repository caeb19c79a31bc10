"""Bookmarks with folders, undo of deletions, simulated browsing history, text storage and HTML export."""

__version__ = "0.1.0"