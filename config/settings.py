from dataclasses import dataclass
from pathlib import Path

# Dossier racine du projet
BASE_DIR = Path(__file__).parent.parent

# Mettre True pour afficher les tracebacks complets
DEBUG = False

# Base de données : "mysql" (serveur) ou "sqlite" (fichier local)
DB_BACKEND = "mysql"
DB_HOST = "localhost"
DB_NAME = "jeu"
DB_USER = "sayf"
DB_PASSWORD = "sayfamine"
# Le fichier SQLite doit contenir la table `jeu` : il n'est jamais créé ici
SQLITE_PATH = BASE_DIR / "data" / "jeu.db"

# Table des joueurs
TABLE_NAME = "jeu"

# Clé utilisée pour retrouver la ligne à mettre à jour : "nom" ou "id"
# Avec "nom", tous les joueurs portant le même nom reçoivent la note.
NOTE_MATCH_KEY = "nom"

# Fenêtre
WINDOW_TITLE = "Notes des joueurs"
WINDOW_GEOMETRY = "500x400"
GRID_WIDTH = 400
GRID_HEIGHT = 300
GRID_X = 50
GRID_Y = 50
COLUMN_HEADERS = ("Nom", "Club", "Note")
NOTE_COLUMN = 2
LOGO_PATH = BASE_DIR / "assets" / "logo.png"


@dataclass(frozen=True)
class DbConfig:
    backend: str = DB_BACKEND
    host: str = DB_HOST
    database: str = DB_NAME
    user: str = DB_USER
    password: str = DB_PASSWORD
    table: str = TABLE_NAME


def default_db_config():
    """Construit la configuration de connexion à partir des constantes ci-dessus."""
    if DB_BACKEND == "sqlite":
        return DbConfig(backend="sqlite", host="", database=str(SQLITE_PATH), user="", password="")
    return DbConfig()
