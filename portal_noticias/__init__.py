# Garante que o app Celery seja carregado junto com o Django (shared_task usa este app)
from .celery import app as celery_app

__all__ = ('celery_app',)
