from django.apps import AppConfig


class PublicidadeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.publicidade'
    verbose_name = 'Publicidade'
