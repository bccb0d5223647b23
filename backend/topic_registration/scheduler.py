"""
Planificateur APScheduler pour la connexion à la base au démarrage.

Le job tente une connexion immédiatement puis toutes les
DB_CONNECT_RETRY_SECONDS secondes, et se retire dès que la base répond.
Pendant ce temps l'API tourne et répond 503 sur les routes qui ont besoin
de la base.
"""

import logging
from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler

from topic_registration import database
from topic_registration.config import settings

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler()

CONNECT_JOB_ID = "database_connect"


def _connect_database() -> None:
    """Tâche planifiée : tente init_db() et retire le job en cas de succès."""
    if database.init_db():
        scheduler.remove_job(CONNECT_JOB_ID)
        logger.info("Base de données prête, tentatives de connexion arrêtées.")
    else:
        logger.warning(
            "Base de données injoignable, nouvelle tentative dans %d s.",
            settings.DB_CONNECT_RETRY_SECONDS,
        )


def start_scheduler() -> None:
    """Démarre le planificateur en arrière-plan (appelé au démarrage de l'API)."""
    scheduler.add_job(
        _connect_database,
        trigger="interval",
        seconds=settings.DB_CONNECT_RETRY_SECONDS,
        next_run_time=datetime.now(),
        id=CONNECT_JOB_ID,
        replace_existing=True,
        max_instances=1,
    )
    scheduler.start()
    logger.info("Scheduler démarré, connexion à la base en cours.")


def stop_scheduler() -> None:
    """Arrête le planificateur proprement (appelé à l'arrêt de l'API)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
