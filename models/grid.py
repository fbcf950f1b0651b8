# models/grid.py
"""
Grille des joueurs et synchronisation avec la table `jeu`.

PlayerGrid garde la copie affichée (Nom, Club, Note) et publie un événement
CellChanged à chaque modification de cellule. GridSynchronizer remplit la
grille au chargement puis, pour chaque note modifiée, envoie une seule mise à
jour en base sur une connexion ouverte pour l'occasion.
"""

import re
import traceback
from dataclasses import dataclass

from config.settings import DEBUG, NOTE_COLUMN, NOTE_MATCH_KEY
from models.database import (
    DatabaseConnectionError,
    DatabaseError,
    QueryError,
    fetch_all_players,
    update_note,
    update_note_by_id,
)
from models.player import GridRow

EMPTY = "empty"
POPULATED = "populated"

# Bornes d'un entier signé 32 bits (colonne INT)
NOTE_MIN = -2 ** 31
NOTE_MAX = 2 ** 31 - 1

_NOTE_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


class NoteParseError(ValueError):
    """Le texte saisi n'est pas un entier valide."""


def parse_note(text):
    """Convertit le texte d'une cellule Note en entier, ou lève NoteParseError."""
    if text is None or not _NOTE_RE.fullmatch(text):
        raise NoteParseError(f"Note invalide: {text!r}")
    value = int(text)
    if not NOTE_MIN <= value <= NOTE_MAX:
        raise NoteParseError(f"Note hors limites: {value}")
    return value


@dataclass(frozen=True)
class CellChanged:
    row: int
    column: int
    text: str


class PlayerGrid:
    def __init__(self):
        self.rows = []
        self._listeners = []

    def __len__(self):
        return len(self.rows)

    def subscribe(self, callback):
        """callback(event: CellChanged) est appelé après chaque set_cell."""
        if callback not in self._listeners:
            self._listeners.append(callback)
        return callback

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def append_row(self, row):
        # Le remplissage initial ne publie pas d'événement
        self.rows.append(row)
        return len(self.rows) - 1

    def cell(self, row, column):
        return self.rows[row].get(column)

    def set_cell(self, row, column, text):
        self.rows[row].set(column, text)
        event = CellChanged(row, column, text)
        for callback in list(self._listeners):
            callback(event)

    def as_tuples(self):
        return [tuple(r.cells()) for r in self.rows]


class GridSynchronizer:
    """
    Fait le lien entre la grille et la base.

    db: objet fournissant get_connection() (voir DatabaseManager).
    match_key: "nom" (comportement historique) ou "id".
    """

    def __init__(self, db, grid=None, match_key=NOTE_MATCH_KEY, autoload=True):
        if match_key not in ("nom", "id"):
            raise ValueError(f"match_key doit valoir 'nom' ou 'id', pas {match_key!r}")
        self.db = db
        self.grid = grid if grid is not None else PlayerGrid()
        self.match_key = match_key
        self.state = EMPTY
        self.last_error = None
        self._status_listeners = []
        if autoload:
            self.load()

    def add_status_listener(self, callback):
        """callback(message, error) ; error vaut None pour un succès."""
        self._status_listeners.append(callback)

    def _notify(self, message, error=None):
        print(message)
        if error is not None and DEBUG:
            traceback.print_exception(type(error), error, error.__traceback__)
        for callback in self._status_listeners:
            callback(message, error)

    def report(self, message, error):
        self.last_error = error
        self._notify(message, error)

    def load(self):
        """Remplit la grille une seule fois. Retourne False si la lecture échoue."""
        if self.state == POPULATED:
            return True

        rows = []
        try:
            with self.db.get_connection() as conn:
                for record in fetch_all_players(conn):
                    rows.append(GridRow.from_record(record))
        except DatabaseConnectionError as e:
            self.report(f"Échec de la connexion à la base de données: {e}", e)
            return False
        except QueryError as e:
            self.report(f"Erreur lors de la lecture des joueurs: {e}", e)
            return False

        for row in rows:
            self.grid.append_row(row)
        self.state = POPULATED
        # Abonnement après remplissage : le chargement ne déclenche aucune écriture
        self.grid.subscribe(self.on_cell_changed)
        return True

    def on_cell_changed(self, event):
        if event.column != NOTE_COLUMN:
            return
        self.on_note_edited(event.row, event.text)

    def on_note_edited(self, row, new_text):
        """
        Envoie la nouvelle note en base. Le texte saisi reste affiché même en
        cas d'échec. Retourne True si la mise à jour a réussi.
        """
        try:
            note = parse_note(new_text)
        except NoteParseError as e:
            self.report("La note n'est pas un entier valide", e)
            return False

        grid_row = self.grid.rows[row]
        name = grid_row.name
        try:
            with self.db.get_connection() as conn:
                if self.match_key == "id":
                    update_note_by_id(conn, grid_row.player_id, note)
                else:
                    update_note(conn, name, note)
        except DatabaseConnectionError as e:
            self.report(f"Échec de la connexion pour la mise à jour de la note: {e}", e)
            return False
        except DatabaseError as e:
            self.report(f"Erreur lors de la mise à jour de la note: {e}", e)
            return False

        self.last_error = None
        self._notify(f"Nouvelle note pour {name} qui passe à: {note}")
        return True
