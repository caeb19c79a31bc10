import pytest

from favoritos.history import HistoryManager
from favoritos.html_export import export_to_file, render_html
from favoritos.manager import BookmarkManager
from favoritos.models import Bookmark, Page


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data_test"
    directory.mkdir()
    return directory


def test_html_export(data_dir):
    manager = BookmarkManager()
    manager.add_bookmark(Bookmark("https://uno.com", "Uno"))
    manager.add_bookmark(Bookmark("https://dos.com", "Dos", "Lectura"))
    manager.create_folder("Lectura")
    manager.add_bookmark_to_folder(Bookmark("https://tres.com", "Tres", "Lectura"), "Lectura")
    manager.create_folder("Trabajo")
    manager.add_bookmark_to_folder(Bookmark("https://cuatro.com", "Cuatro", "Trabajo"), "Trabajo")

    html_file = data_dir / "export_test.html"
    export_to_file(manager, html_file)
    text = html_file.read_text(encoding="utf-8")
    assert "https://uno.com" in text
    assert "https://cuatro.com" in text
    assert "https://tres.com" in text
    assert "https://dos.com" not in text


def test_export_html_manual(data_dir):
    manager = BookmarkManager()
    manager.add_bookmark(Bookmark("https://ejemplo.com", "Ejemplo"))
    manager.create_folder("Sitios")
    manager.add_bookmark_to_folder(Bookmark("https://otro.com", "Otro", "Sitios"), "Sitios")
    html_file = data_dir / "export.html"
    export_to_file(manager, html_file)
    lines = html_file.read_text(encoding="utf-8").splitlines()
    assert any("https://ejemplo.com" in line for line in lines)


def test_render_structure():
    manager = BookmarkManager()
    manager.add_bookmark(Bookmark("https://uno.com", "Uno"))
    manager.create_folder("Docs")
    html = render_html(manager)
    assert html.startswith("<!DOCTYPE html>\n<html>\n")
    assert html.endswith("</body>\n</html>\n")
    assert "<h1>Favoritos</h1>\n" in html
    assert "<h2>Sin carpeta</h2>\n<ul>\n" in html
    assert '<li><a href="https://uno.com">Uno</a></li>\n' in html
    assert "<h2>Docs</h2>\n<ul>\n</ul>\n" in html


def test_loose_section_precedes_folders():
    manager = BookmarkManager()
    manager.create_folder("Docs")
    manager.add_bookmark_to_folder(Bookmark("https://doc.com", "Doc", "Docs"), "Docs")
    html = render_html(manager)
    assert html.index("Sin carpeta") < html.index("<h2>Docs</h2>")
    assert html.index("<h2>Docs</h2>") < html.index("https://doc.com")


def test_persistence_then_export(data_dir):
    bookmarks_file = data_dir / "bookmarks.txt"
    folders_file = data_dir / "folders.txt"
    manager = BookmarkManager()
    manager.add_bookmark(Bookmark("https://uno.com", "Uno"))
    manager.create_folder("Docs")
    manager.add_bookmark_to_folder(Bookmark("https://doc.com", "Doc", "Docs"), "Docs")
    manager.save_to_disk(bookmarks_file, folders_file)

    loaded = BookmarkManager()
    loaded.load_from_disk(bookmarks_file, folders_file)
    assert loaded.total_bookmarks() == 1
    assert loaded.folders.find_by_name("Docs") is not None

    html_file = data_dir / "export.html"
    export_to_file(loaded, html_file)
    assert "https://doc.com" in html_file.read_text(encoding="utf-8")


def test_full_session(data_dir):
    bookmarks_file = data_dir / "bookmarks.txt"
    folders_file = data_dir / "folders.txt"
    html_file = data_dir / "export.html"

    manager = BookmarkManager()
    history = HistoryManager()
    history.visit(Page("https://final.test", "Final Test"))
    current = history.current()
    assert current.url == "https://final.test"

    assert manager.add_bookmark(Bookmark(current.url, "Test", ""))
    manager.create_folder("Trabajo")
    assert manager.add_bookmark_to_folder(Bookmark(current.url, "Test Copia", "Trabajo"), "Trabajo")

    manager.save_to_disk(bookmarks_file, folders_file)
    assert bookmarks_file.exists()
    assert folders_file.exists()

    fresh = BookmarkManager()
    fresh.load_from_disk(bookmarks_file, folders_file)
    assert fresh.total_bookmarks() == 1

    saved = fresh.at(0)
    history.visit(Page(saved.url, saved.name))
    assert history.current().title == "Test"

    export_to_file(fresh, html_file)
    assert html_file.exists()


def test_export_to_missing_directory_raises(tmp_path):
    manager = BookmarkManager()
    with pytest.raises(OSError):
        export_to_file(manager, tmp_path / "missing" / "export.html")