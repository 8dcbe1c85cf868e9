# cartly/celery_worker.py
from celery import Celery

from cartly.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND

celery_app = Celery(
    "cartly",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAŻNE: Explicite importuj taski, żeby Celery je zarejestrował
celery_app.conf.imports = (
    "cartly.services.analytics_service",
)

#analityka to fire-and-forget - nie czekamy dlugo na brokera
celery_app.conf.task_publish_retry_policy = {
    "max_retries": 1,
    "interval_start": 0,
    "interval_step": 0.2,
    "interval_max": 0.2,
}
celery_app.conf.task_ignore_result = True
celery_app.conf.timezone = "UTC"
