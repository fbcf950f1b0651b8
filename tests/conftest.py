"""Fixtures partagées : une base SQLite temporaire avec la table `jeu`."""

import sqlite3

import pytest

from config.settings import DbConfig
from models.database import DatabaseManager

PLAYERS = [
    (1, "Ana", "FC", 10),
    (2, "Bruno", "OM", 12),
    (3, "Chloé", "PSG", 7),
]


def create_store(path, rows):
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE jeu (id INTEGER PRIMARY KEY, Nom TEXT, club TEXT, Note INTEGER)")
    conn.executemany("INSERT INTO jeu VALUES (?, ?, ?, ?)", rows)
    conn.commit()
    conn.close()
    return path


def read_store(path):
    conn = sqlite3.connect(path)
    try:
        return conn.execute("SELECT id, Nom, club, Note FROM jeu ORDER BY id").fetchall()
    finally:
        conn.close()


@pytest.fixture
def db_path(tmp_path):
    return create_store(tmp_path / "jeu.db", PLAYERS)


@pytest.fixture
def config(db_path):
    return DbConfig(backend="sqlite", host="", database=str(db_path), user="", password="")


@pytest.fixture
def db(config):
    return DatabaseManager(config)
