#!/usr/bin/env python3
"""
Notes joueurs - grille éditable de la table `jeu`
"""

import sys
from pathlib import Path

# Ajouter le dossier du projet au path Python
sys.path.append(str(Path(__file__).parent))

from app.startup_probe import probe_database
from config.settings import default_db_config
from interfaces.players_window import PlayersWindow
from models.database import DatabaseManager


def ensure_data_dir(config):
    """Crée le dossier du fichier SQLite s'il n'existe pas. Le fichier lui-même doit être fourni."""
    if config.backend == "sqlite":
        Path(config.database).parent.mkdir(parents=True, exist_ok=True)


def main():
    print("Notes joueurs - Démarrage...")

    config = default_db_config()
    ensure_data_dir(config)
    probe_database(DatabaseManager(config))

    # La fenêtre s'ouvre même si la base est injoignable
    app = PlayersWindow(config)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
