import os
import tkinter as tk
from tkinter import ttk

from config.settings import (
    COLUMN_HEADERS,
    GRID_HEIGHT,
    GRID_WIDTH,
    GRID_X,
    GRID_Y,
    LOGO_PATH,
    WINDOW_GEOMETRY,
    WINDOW_TITLE,
    default_db_config,
)
from models.database import DatabaseManager
from models.grid import GridSynchronizer

COLUMN_IDS = ("nom", "club", "note")
STATUS_OK_COLOR = "#27AE60"
STATUS_ERROR_COLOR = "#E74C3C"


class PlayersWindow:
    def __init__(self, db_config=None):
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self.setup_styles()

        # Base de données
        self.db = DatabaseManager(db_config if db_config is not None else default_db_config())

        # Édition en place
        self.edit_entry = None
        self.edit_var = None

        self.load_logo()
        self.create_widgets()

        # Remplissage de la grille, puis affichage
        self.sync = GridSynchronizer(self.db, autoload=False)
        self.sync.add_status_listener(self.show_status)
        self.sync.load()
        self.refresh_tree()

        self.root.protocol("WM_DELETE_WINDOW", self.on_closing)

    def setup_styles(self):
        """Configure les styles personnalisés."""
        style = ttk.Style()
        style.configure("Grid.Treeview", rowheight=22)
        style.configure("Grid.Treeview.Heading", font=("Arial", 10, "bold"))

    def load_logo(self):
        """Charge le logo PNG comme icône de la fenêtre."""
        try:
            if os.path.exists(LOGO_PATH):
                from PIL import Image, ImageTk
                image = Image.open(LOGO_PATH)
                image = image.resize((32, 32), Image.Resampling.LANCZOS)
                self.logo_image = ImageTk.PhotoImage(image)
                self.root.iconphoto(True, self.logo_image)
            else:
                self.logo_image = None
        except (OSError, tk.TclError) as e:
            print(f"Erreur chargement logo: {e}")
            self.logo_image = None

    def create_widgets(self):
        """Crée la grille et la barre d'état."""
        self.tree = ttk.Treeview(self.root, columns=COLUMN_IDS, show="headings",
                                 selectmode="browse", style="Grid.Treeview")
        for col_id, header in zip(COLUMN_IDS, COLUMN_HEADERS):
            self.tree.heading(col_id, text=header)
            self.tree.column(col_id, width=GRID_WIDTH // len(COLUMN_IDS), anchor=tk.W)
        self.tree.place(x=GRID_X, y=GRID_Y, width=GRID_WIDTH, height=GRID_HEIGHT)

        # Édition : double-clic, ou clic sur une ligne déjà sélectionnée
        self.tree.bind("<Double-1>", self.start_edit)
        self.tree.bind("<Button-1>", self._on_click)

        self.status_label = tk.Label(self.root, text="", font=("Arial", 9), anchor="w")
        self.status_label.place(x=GRID_X, y=GRID_Y + GRID_HEIGHT + 8, width=GRID_WIDTH)

    def refresh_tree(self):
        for item in self.tree.get_children():
            self.tree.delete(item)
        for index, values in enumerate(self.sync.grid.as_tuples()):
            self.tree.insert("", "end", iid=str(index), values=values)

    def show_status(self, message, error=None):
        color = STATUS_ERROR_COLOR if error is not None else STATUS_OK_COLOR
        self.status_label.config(text=message, fg=color)

    def _on_click(self, event):
        item = self.tree.identify_row(event.y)
        if item and item in self.tree.selection():
            self.start_edit(event)

    def start_edit(self, event):
        item = self.tree.identify_row(event.y)
        column = self.tree.identify_column(event.x)
        if not item or column == "#0":
            return
        bbox = self.tree.bbox(item, column)
        if not bbox:
            return
        x, y, w, h = bbox
        row = int(item)
        col = int(column[1:]) - 1

        self.cancel_edit()
        self.edit_var = tk.StringVar(value=self.tree.set(item, column))
        self.edit_entry = tk.Entry(self.tree, textvariable=self.edit_var)
        self.edit_entry.place(x=x, y=y, width=w, height=h)
        self.edit_entry.select_range(0, tk.END)
        entry = self.edit_entry
        # Focus différé : le clic sur la grille reprend le focus juste après
        entry.after(0, lambda: self._focus_editor(entry))
        entry.bind("<Return>", lambda e: self.commit_edit(entry, item, row, col))
        entry.bind("<FocusOut>", lambda e: self.commit_edit(entry, item, row, col))
        entry.bind("<Escape>", lambda e: self.cancel_edit())

    def _focus_editor(self, entry):
        if entry is self.edit_entry:
            entry.focus_set()

    def commit_edit(self, entry, item, row, col):
        # Un éditeur déjà remplacé ou fermé ne valide rien
        if entry is not self.edit_entry:
            return
        text = self.edit_var.get()
        self.edit_entry = None
        entry.destroy()

        # Valeur identique : pas de changement, pas d'écriture
        if text == self.sync.grid.cell(row, col):
            return
        self.tree.set(item, COLUMN_IDS[col], text)
        self.sync.grid.set_cell(row, col, text)

    def cancel_edit(self):
        if self.edit_entry is not None:
            entry, self.edit_entry = self.edit_entry, None
            entry.destroy()

    def on_closing(self):
        self.cancel_edit()
        self.root.destroy()

    def run(self):
        self.root.mainloop()
