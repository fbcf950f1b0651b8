# models/database.py
"""
Accès à la table des joueurs.

Chaque opération reçoit explicitement la connexion qu'elle utilise ; il n'y a
pas de connexion partagée au niveau du module. Deux pilotes sont supportés :
MySQL (mysql-connector) et SQLite (fichier local).

Usage:
    from models.database import DatabaseManager, fetch_all_players
    db = DatabaseManager(default_db_config())
    with db.get_connection() as conn:
        for player in fetch_all_players(conn):
            print(player.name, player.club)
"""

import sqlite3
import traceback
from contextlib import contextmanager
from pathlib import Path

import mysql.connector
from mysql.connector.constants import ClientFlag

from config.settings import DEBUG
from models.player import PlayerRecord

DRIVER_ERRORS = (mysql.connector.Error, sqlite3.Error)


class DatabaseError(Exception):
    """Erreur de base pour tout ce qui touche la base de données."""


class DatabaseConnectionError(DatabaseError):
    """Impossible de joindre ou de s'authentifier auprès de la base."""


class QueryError(DatabaseError):
    """Requête refusée, mal formée, ou mise à jour sans ligne correspondante."""


class Connection:
    """Connexion ouverte, possédée par l'appelant jusqu'à close()."""

    def __init__(self, raw, backend, table, host=""):
        self.raw = raw
        self.backend = backend
        self.table = table
        self.host = host
        self.closed = False

    @property
    def placeholder(self):
        return "%s" if self.backend == "mysql" else "?"


def _open_mysql(config):
    return mysql.connector.connect(
        host=config.host,
        database=config.database,
        user=config.user,
        password=config.password,
        # rowcount = lignes trouvées, pas seulement modifiées
        client_flags=[ClientFlag.FOUND_ROWS],
    )


def _open_sqlite(config):
    # mode=rw : pas de création silencieuse d'un fichier vide
    uri = Path(config.database).resolve().as_uri() + "?mode=rw"
    return sqlite3.connect(uri, uri=True)


def connect(config):
    """
    Ouvre une connexion avec la configuration donnée.
    Lève DatabaseConnectionError avec le message du pilote en cas d'échec.
    """
    if config.backend == "mysql":
        opener = _open_mysql
    elif config.backend == "sqlite":
        opener = _open_sqlite
    else:
        raise DatabaseConnectionError(f"Pilote inconnu: {config.backend}")

    try:
        raw = opener(config)
    except DRIVER_ERRORS as e:
        raise DatabaseConnectionError(str(e)) from e

    conn = Connection(raw, config.backend, config.table, host=config.host or config.database)
    print(f"Connecté à la base de données {conn.host}")
    return conn


def close(conn):
    """Libère la connexion. Sans effet si elle est déjà fermée."""
    if conn is None or conn.closed:
        return
    conn.closed = True
    try:
        conn.raw.close()
    except DRIVER_ERRORS as e:
        print("[database] close error:", e)
        if DEBUG:
            traceback.print_exc()


def _note_value(value):
    # Une note NULL ou illisible s'affiche 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _text_value(value):
    return "" if value is None else str(value)


def fetch_all_players(conn):
    """
    Exécute SELECT * FROM jeu et renvoie un itérateur à un seul passage.
    Colonnes lues par position : 0 = id, 1 = Nom, 2 = club, 3 = Note.
    """
    cursor = conn.raw.cursor()
    try:
        cursor.execute(f"SELECT * FROM `{conn.table}`")
    except DRIVER_ERRORS as e:
        cursor.close()
        raise QueryError(str(e)) from e

    def rows():
        try:
            for row in cursor:
                yield PlayerRecord(
                    id=row[0],
                    name=_text_value(row[1]),
                    club=_text_value(row[2]),
                    note=_note_value(row[3]),
                )
        except DRIVER_ERRORS as e:
            raise QueryError(str(e)) from e
        finally:
            cursor.close()

    return rows()


def _execute_update(conn, sql, params):
    cursor = conn.raw.cursor()
    try:
        cursor.execute(sql, params)
        conn.raw.commit()
        return cursor.rowcount
    except DRIVER_ERRORS as e:
        raise QueryError(str(e)) from e
    finally:
        cursor.close()


def update_note(conn, name, note):
    """
    UPDATE jeu SET Note = ? WHERE Nom = ?
    La correspondance se fait sur le nom : plusieurs lignes peuvent changer.
    Retourne le nombre de lignes touchées ; aucune ligne -> QueryError.
    """
    ph = conn.placeholder
    count = _execute_update(
        conn,
        f"UPDATE `{conn.table}` SET `Note` = {ph} WHERE `Nom` = {ph}",
        (note, name),
    )
    if count == 0:
        raise QueryError(f"Aucun joueur nommé {name!r}")
    return count


def update_note_by_id(conn, player_id, note):
    """Même mise à jour, mais sur l'identifiant de la ligne."""
    ph = conn.placeholder
    count = _execute_update(
        conn,
        f"UPDATE `{conn.table}` SET `Note` = {ph} WHERE `id` = {ph}",
        (note, player_id),
    )
    if count == 0:
        raise QueryError(f"Aucun joueur avec l'id {player_id!r}")
    return count


class DatabaseManager:
    def __init__(self, config):
        self.config = config

    @contextmanager
    def get_connection(self):
        """Ouvre une connexion et la ferme sur tous les chemins de sortie."""
        conn = connect(self.config)
        try:
            yield conn
        finally:
            close(conn)
