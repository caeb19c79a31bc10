"""Plain-text persistence of bookmarks and folders.

Each bookmark is one line ``url|name|folder``. A folders file holds, per
folder, a ``#Carpeta:<name>`` line, its bookmarks, and a blank line.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from favoritos.collections import BookmarkList, Folder, FolderList
from favoritos.models import Bookmark

FOLDER_HEADER = "#Carpeta:"

PathLike = str | Path


def _open_for_writing(path: PathLike) -> TextIO:
    target = Path(path)
    parent = target.parent
    if parent != Path("."):
        parent.mkdir(exist_ok=True)
    return target.open("w", encoding="utf-8")


def _format_record(bookmark: Bookmark) -> str:
    return f"{bookmark.url}|{bookmark.name}|{bookmark.folder}\n"


def _parse_record(line: str) -> Bookmark:
    fields = line.rstrip("\n").split("|", 2)
    fields += [""] * (3 - len(fields))
    url, name, folder = fields
    return Bookmark(url, name, folder)


def save_bookmarks(bookmarks: Iterable[Bookmark], path: PathLike) -> None:
    """Write ``bookmarks`` in order, creating the parent directory if needed."""
    with _open_for_writing(path) as handle:
        handle.writelines(_format_record(b) for b in bookmarks)


def load_bookmarks(path: PathLike) -> BookmarkList:
    """Read a bookmarks file; each record is added in turn to a new list."""
    bookmarks = BookmarkList()
    with Path(path).open(encoding="utf-8") as handle:
        for line in handle:
            bookmarks.add(_parse_record(line))
    return bookmarks


def save_folders(folders: Iterable[Folder], path: PathLike) -> None:
    """Write every folder with its bookmarks, creating the parent directory if needed."""
    with _open_for_writing(path) as handle:
        for folder in folders:
            handle.write(f"{FOLDER_HEADER}{folder.name}\n")
            handle.writelines(_format_record(b) for b in folder.bookmarks)
            handle.write("\n")


def load_folders(path: PathLike) -> FolderList:
    """Read a folders file into a new folder list.

    Bookmark lines that appear before any folder header are ignored.
    """
    folders = FolderList()
    current: Folder | None = None
    with Path(path).open(encoding="utf-8") as handle:
        for line in handle:
            if line.startswith("#"):
                name = line[len(FOLDER_HEADER):].rstrip("\n")
                folders.add(Folder(name))
                current = folders.find_by_name(Folder(name).name)
            elif line != "\n" and current is not None:
                current.add_bookmark(_parse_record(line))
    return folders