# app/startup_probe.py
"""
Vérification au démarrage : ouvre une connexion, liste les joueurs
(nom et club) sur la sortie de diagnostic, puis referme la connexion.
Un échec est affiché mais n'empêche pas l'ouverture de la fenêtre.
"""

from models.database import DatabaseConnectionError, QueryError, fetch_all_players


def probe_database(db):
    """Retourne le nombre de joueurs lus, ou None en cas d'échec."""
    try:
        with db.get_connection() as conn:
            print("Vous êtes maintenant connecté à", conn.host)
            count = 0
            for player in fetch_all_players(conn):
                print(player.name, player.club)
                count += 1
            print("Requête ok ! :)")
            return count
    except DatabaseConnectionError as e:
        print("La connexion a échoué, désolé", e)
        return None
    except QueryError as e:
        print("La requête a échoué:", e)
        return None
