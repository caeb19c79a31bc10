"""Export of bookmarks and folders as an HTML page."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from favoritos.manager import BookmarkManager
from favoritos.models import Bookmark

_HEADER = (
    "<!DOCTYPE html>\n<html>\n"
    '<head><meta charset="UTF-8"><title>Favoritos</title></head>\n<body>\n'
    "<h1>Favoritos</h1>\n"
)
_FOOTER = "</body>\n</html>\n"


def _section(title: str, bookmarks: Iterable[Bookmark]) -> str:
    items = "".join(f'<li><a href="{b.url}">{b.name}</a></li>\n' for b in bookmarks)
    return f"<h2>{title}</h2>\n<ul>\n{items}</ul>\n"


def render_html(manager: BookmarkManager) -> str:
    """Render loose bookmarks without a folder tag, then each folder's bookmarks."""
    parts = [_HEADER, _section("Sin carpeta", (b for b in manager.bookmarks if not b.folder))]
    parts.extend(_section(folder.name, folder.bookmarks) for folder in manager.folders)
    parts.append(_FOOTER)
    return "".join(parts)


def export_to_file(manager: BookmarkManager, path: str | Path) -> None:
    """Write the rendered page to ``path``; the directory must already exist."""
    Path(path).write_text(render_html(manager), encoding="utf-8")