# models/player.py
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlayerRecord:
    """Une ligne de la table `jeu` telle que lue en base."""
    id: Any
    name: str
    club: str
    note: int


@dataclass
class GridRow:
    """
    Copie affichée d'un joueur : colonnes (nom, club, note en texte).
    player_id n'est pas affiché ; il sert seulement si NOTE_MATCH_KEY = "id".
    """
    name: str
    club: str
    note: str
    player_id: Any = None

    @classmethod
    def from_record(cls, record):
        return cls(record.name, record.club, str(record.note), record.id)

    def cells(self):
        return [self.name, self.club, self.note]

    def get(self, column):
        return self.cells()[column]

    def set(self, column, text):
        if column == 0:
            self.name = text
        elif column == 1:
            self.club = text
        elif column == 2:
            self.note = text
        else:
            raise IndexError(f"Colonne inconnue: {column}")
