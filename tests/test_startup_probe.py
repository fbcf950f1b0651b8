"""Tests de la vérification de la base au démarrage."""

import sqlite3

from app.startup_probe import probe_database
from config.settings import DbConfig
from models.database import DatabaseManager


def sqlite_manager(path):
    return DatabaseManager(DbConfig(backend="sqlite", host="", database=str(path),
                                    user="", password=""))


class TestProbeDatabase:

    def test_lists_players(self, db, capsys):
        assert probe_database(db) == 3
        out = capsys.readouterr().out
        assert "Ana FC" in out
        assert "Bruno OM" in out
        assert "Requête ok ! :)" in out

    def test_connection_failure_is_printed(self, tmp_path, capsys):
        assert probe_database(sqlite_manager(tmp_path / "absent.db")) is None
        assert "La connexion a échoué" in capsys.readouterr().out

    def test_query_failure_is_not_a_connection_failure(self, tmp_path, capsys):
        path = tmp_path / "sans_table.db"
        sqlite3.connect(path).close()
        assert probe_database(sqlite_manager(path)) is None
        out = capsys.readouterr().out
        assert "La requête a échoué" in out
        assert "La connexion a échoué" not in out
