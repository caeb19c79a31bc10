"""Bookmark management: loose bookmarks, folders and an undo stack."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Callable
from pathlib import Path

from favoritos.collections import BookmarkList, Folder, FolderList
from favoritos.models import Bookmark
from favoritos.storage import load_bookmarks, load_folders, save_bookmarks, save_folders

MAX_DELETED = 5

PathLike = str | Path


class BookmarkManager:
    """Holds loose bookmarks, folders, and the most recently deleted bookmarks."""

    def __init__(self) -> None:
        self._bookmarks = BookmarkList()
        self._deleted: deque[Bookmark] = deque(maxlen=MAX_DELETED)
        self._folders = FolderList()

    @property
    def bookmarks(self) -> BookmarkList:
        """Bookmarks that live outside any folder, newest first."""
        return self._bookmarks

    @property
    def folders(self) -> FolderList:
        """All folders, newest first."""
        return self._folders

    def at(self, index: int) -> Bookmark | None:
        """Return the loose bookmark at ``index``, or None if out of range."""
        return self._bookmarks.at(index)

    def add_bookmark(self, bookmark: Bookmark) -> bool:
        """Add a loose bookmark unless its URL or name is already taken."""
        if any(
            existing.url == bookmark.url or existing.name == bookmark.name
            for existing in self._bookmarks
        ):
            return False
        self._bookmarks.add(bookmark)
        return True

    def _remove_first(self, matches: Callable[[Bookmark], bool]) -> bool:
        found = next((b for b in self._bookmarks if matches(b)), None)
        if found is None:
            return False
        self._deleted.append(copy.copy(found))
        self._bookmarks.remove_by_url(found.url)
        return True

    def remove_bookmark(self, key: str) -> bool:
        """Remove the first loose bookmark whose URL or name equals ``key``."""
        return self._remove_first(lambda b: b.url == key or b.name == key)

    def remove_bookmark_by_url(self, url: str) -> bool:
        """Remove the first loose bookmark with ``url``, keeping it for restore."""
        return self._remove_first(lambda b: b.url == url)

    def remove_bookmark_by_name(self, name: str) -> bool:
        """Remove the first loose bookmark called ``name``, keeping it for restore."""
        return self._remove_first(lambda b: b.name == name)

    def restore_bookmark(self) -> bool:
        """Put back the most recently deleted bookmark, if any is remembered."""
        if not self._deleted:
            return False
        self._bookmarks.add(self._deleted.pop())
        return True

    def total_bookmarks(self) -> int:
        return len(self._bookmarks)

    def create_folder(self, name: str) -> None:
        """Create a folder called ``name`` unless one already exists."""
        if self._folders.find_by_name(name) is None:
            self._folders.add(Folder(name))

    def add_bookmark_to_folder(self, bookmark: Bookmark, folder_name: str) -> bool:
        """Add ``bookmark`` to an existing folder; False if the folder is missing."""
        folder = self._folders.find_by_name(folder_name)
        if folder is None:
            return False
        folder.add_bookmark(bookmark)
        return True

    def find_bookmark_in_folder(self, name: str, folder_name: str) -> Bookmark | None:
        folder = self._folders.find_by_name(folder_name)
        if folder is None:
            return None
        return folder.bookmarks.find_by_name(name)

    def total_folders(self) -> int:
        return len(self._folders)

    def save_to_disk(self, bookmarks_path: PathLike, folders_path: PathLike) -> None:
        """Write loose bookmarks and folders to their files."""
        save_bookmarks(reversed(list(self._bookmarks)), bookmarks_path)
        save_folders(self._folders, folders_path)

    def load_from_disk(self, bookmarks_path: PathLike, folders_path: PathLike) -> None:
        """Replace bookmarks and folders with the files' contents.

        A file that cannot be read leaves the matching collection empty.
        """
        try:
            loaded = load_bookmarks(bookmarks_path)
        except OSError:
            loaded = BookmarkList()
        self._bookmarks.clear()
        for bookmark in loaded:
            self._bookmarks.add(bookmark)

        try:
            self._folders = load_folders(folders_path)
        except OSError:
            self._folders = FolderList()