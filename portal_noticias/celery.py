import os
from celery import Celery

# Configura o settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'portal_noticias.settings.development')

app = Celery('portal_noticias')

# Configurações CELERY_* do Django (broker, serializer, eager nos testes)
app.config_from_object('django.conf:settings', namespace='CELERY')

# Tasks de apps.noticias (e de qualquer outro app instalado)
app.autodiscover_tasks()
