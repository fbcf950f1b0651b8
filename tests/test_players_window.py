"""Tests de la fenêtre (ignorés sans affichage)."""

import tkinter as tk
from types import SimpleNamespace

import pytest

from tests.conftest import read_store


@pytest.fixture
def window(config):
    from interfaces.players_window import PlayersWindow
    try:
        win = PlayersWindow(config)
    except tk.TclError as e:
        pytest.skip(f"pas d'affichage disponible: {e}")
    win.root.update()
    yield win
    win.root.destroy()


def click_on_note(window, monkeypatch, row="0"):
    monkeypatch.setattr(window.tree, "identify_row", lambda y: row)
    monkeypatch.setattr(window.tree, "identify_column", lambda x: "#3")
    monkeypatch.setattr(window.tree, "bbox", lambda item, column: (0, 0, 120, 20))
    window._on_click(SimpleNamespace(x=300, y=10))


class TestInPlaceEdit:

    def test_click_on_selected_row_keeps_editor_open(self, window, monkeypatch):
        window.tree.selection_set("0")
        click_on_note(window, monkeypatch)
        entry = window.edit_entry
        assert entry is not None
        # La grille reprend le focus après le clic, comme sa liaison de classe
        window.tree.focus_set()
        window.root.update()
        assert window.edit_entry is entry
        assert entry.winfo_exists()

    def test_click_on_unselected_row_does_not_edit(self, window, monkeypatch):
        window.tree.selection_set("1")
        click_on_note(window, monkeypatch, row="0")
        assert window.edit_entry is None

    def test_commit_writes_note(self, window, monkeypatch, db_path):
        window.tree.selection_set("0")
        click_on_note(window, monkeypatch)
        entry = window.edit_entry
        window.edit_var.set("15")
        window.commit_edit(entry, "0", 0, 2)
        assert window.edit_entry is None
        assert window.tree.set("0", "note") == "15"
        assert read_store(db_path)[0] == (1, "Ana", "FC", 15)

    def test_cancel_before_focus_is_harmless(self, window, monkeypatch, db_path):
        window.tree.selection_set("0")
        click_on_note(window, monkeypatch)
        window.cancel_edit()
        window.root.update()
        assert window.edit_entry is None
        assert read_store(db_path)[0] == (1, "Ana", "FC", 10)
