# favoritos

A small library for managing bookmarks ("favoritos") and walking through a
simulated browsing history. It can store them in plain-text files and export
them as an HTML page.

## Features

- `favoritos.models`: the `Bookmark` (url, name, folder) and `Page` (url, title)
  dataclasses. Every text field is clipped to 255 characters, at creation and
  whenever it is assigned. `truncate(text)` does the same clipping.
- `favoritos.collections`:
  - `BookmarkList` keeps bookmarks newest first and stores copies. It offers
    `add`, `remove_by_url`, `find_by_name`, `at`, `clear`, `len()` and iteration.
  - `Folder` is a named `BookmarkList` with `add_bookmark` and `remove_bookmark`.
  - `FolderList` keeps folders newest first and offers `add`, `find_by_name`,
    `clear`, `len()` and iteration.
  - `PageStack` is a stack of pages. `pop` and `peek` raise `EmptyStackError`
    (a subclass of `IndexError`) when the stack is empty.
- `favoritos.history.HistoryManager`: `visit`, `go_back`, `go_forward`,
  `current`, `can_go_back` and `can_go_forward`. Visiting a page clears the
  forward history. Going back or forward with nothing there does nothing.
- `favoritos.manager.BookmarkManager`:
  - Loose bookmarks with duplicate protection: `add_bookmark` returns `False`
    when the URL or the name is already taken.
  - Deletion with `remove_bookmark` (by URL or name), `remove_bookmark_by_url`
    and `remove_bookmark_by_name`. The last five deleted bookmarks are kept, and
    `restore_bookmark` puts them back, most recent first.
  - Folders: `create_folder`, `add_bookmark_to_folder`, `find_bookmark_in_folder`
    and `total_folders`.
  - Files: `save_to_disk` and `load_from_disk`. When a file cannot be read, the
    matching collection is left empty.
- `favoritos.storage`: `save_bookmarks`, `load_bookmarks`, `save_folders` and
  `load_folders`. The save functions create the file's parent directory if it
  is missing.
- `favoritos.html_export`: `render_html(manager)` returns the page as a string,
  and `export_to_file(manager, path)` writes it. The page has a "Sin carpeta"
  section with the loose bookmarks that have no folder tag, then one section per
  folder. `export_to_file` does not create missing directories.

## Installation

```
pip install .
```

## Usage

```python
from favoritos.models import Bookmark, Page
from favoritos.manager import BookmarkManager
from favoritos.history import HistoryManager
from favoritos.html_export import export_to_file

manager = BookmarkManager()
manager.add_bookmark(Bookmark("https://example.com", "Example"))
manager.create_folder("Trabajo")
manager.add_bookmark_to_folder(Bookmark("https://example.org", "Docs", "Trabajo"), "Trabajo")

history = HistoryManager()
history.visit(Page("https://example.com", "Example"))
history.visit(Page("https://example.org", "Docs"))
history.go_back()
print(history.current().title)  # Example

manager.save_to_disk("data/bookmarks.txt", "data/folders.txt")

restored = BookmarkManager()
restored.load_from_disk("data/bookmarks.txt", "data/folders.txt")
export_to_file(restored, "data/export.html")
```

Errors while writing files come up as the usual `OSError` exceptions.

## File format

Each bookmark takes one line of the form `url|name|folder`. The folders file
starts each folder with a `#Carpeta:<name>` line, lists its bookmarks in the
same format, and ends the folder with a blank line.

## What this package does not do

It has no interactive menu and installs no command. Creating bookmarks, moving
through history, saving, loading and exporting are all done by calling the
classes and functions above from your own code.

## Tests

```
pip install .[test]
pytest
```