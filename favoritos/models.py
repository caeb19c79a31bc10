"""Value objects shared by the bookmark and navigation code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_LENGTH = 256


def truncate(text: str) -> str:
    """Clip ``text`` to the longest value a stored field may hold."""
    return text[: MAX_LENGTH - 1]


class _BoundedText:
    """Mixin that clips every string attribute on assignment."""

    def __setattr__(self, key: str, value: Any) -> None:
        if isinstance(value, str):
            value = truncate(value)
        super().__setattr__(key, value)


@dataclass
class Bookmark(_BoundedText):
    """A saved link, optionally tagged with the folder it belongs to."""

    url: str
    name: str
    folder: str = ""


@dataclass
class Page(_BoundedText):
    """A page visited while browsing."""

    url: str = ""
    title: str = ""