"""Containers for bookmarks, folders and visited pages."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from favoritos.models import Bookmark, Page, truncate


class BookmarkList:
    """Bookmarks kept newest first; added items are stored as copies."""

    def __init__(self) -> None:
        self._items: list[Bookmark] = []

    def add(self, bookmark: Bookmark) -> None:
        """Insert a copy of ``bookmark`` at the front."""
        self._items.insert(0, copy.copy(bookmark))

    def remove_by_url(self, url: str) -> bool:
        """Remove the first bookmark with ``url``; report whether one was found."""
        for position, bookmark in enumerate(self._items):
            if bookmark.url == url:
                del self._items[position]
                return True
        return False

    def find_by_name(self, name: str) -> Bookmark | None:
        """Return the first bookmark called ``name``, or None."""
        return next((b for b in self._items if b.name == name), None)

    def at(self, index: int) -> Bookmark | None:
        """Return the bookmark at ``index`` from the front, or None if out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BookmarkList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BookmarkList({self._items!r})"


class Folder:
    """A named group of bookmarks."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.bookmarks = BookmarkList()

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            value = truncate(value)
        super().__setattr__(key, value)

    def add_bookmark(self, bookmark: Bookmark) -> None:
        self.bookmarks.add(bookmark)

    def remove_bookmark(self, url: str) -> bool:
        return self.bookmarks.remove_by_url(url)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Folder):
            return NotImplemented
        return self.name == other.name and self.bookmarks == other.bookmarks

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Folder({self.name!r}, {self.bookmarks!r})"


class FolderList:
    """Folders kept newest first; added folders are stored as copies."""

    def __init__(self) -> None:
        self._folders: list[Folder] = []

    def add(self, folder: Folder) -> None:
        """Insert a copy of ``folder`` at the front.

        The copy re-adds each bookmark in turn, so its bookmark order is reversed.
        """
        stored = Folder(folder.name)
        for bookmark in folder.bookmarks:
            stored.add_bookmark(bookmark)
        self._folders.insert(0, stored)

    def find_by_name(self, name: str) -> Folder | None:
        """Return the first folder called ``name``, or None."""
        return next((f for f in self._folders if f.name == name), None)

    def clear(self) -> None:
        self._folders.clear()

    def __len__(self) -> int:
        return len(self._folders)

    def __iter__(self) -> Iterator[Folder]:
        return iter(self._folders)


class EmptyStackError(IndexError):
    """Raised when reading from an empty page stack."""


class PageStack:
    """Last-in, first-out stack of pages."""

    def __init__(self) -> None:
        self._pages: list[Page] = []

    def push(self, page: Page) -> None:
        self._pages.append(copy.copy(page))

    def pop(self) -> Page:
        if not self._pages:
            raise EmptyStackError("Stack is empty")
        return self._pages.pop()

    def peek(self) -> Page:
        if not self._pages:
            raise EmptyStackError("Stack is empty")
        return copy.copy(self._pages[-1])

    def is_empty(self) -> bool:
        return not self._pages

    def clear(self) -> None:
        self._pages.clear()

    def __len__(self) -> int:
        return len(self._pages)