from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0', 'api.lasinformacionesconleyni.com']


# Trusted Origins para Django Admin / CSRF
CSRF_TRUSTED_ORIGINS = [
    "https://lasinformacionesconleyni.com",
    "http://localhost:8000",
]

# CORS Configuration for Next.js
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://lasinformacionesconleyni.com",
]


CORS_ALLOW_CREDENTIALS = True

# Debug Toolbar
if DEBUG:
    INSTALLED_APPS += ['debug_toolbar']
    MIDDLEWARE = ['debug_toolbar.middleware.DebugToolbarMiddleware'] + MIDDLEWARE
    INTERNAL_IPS = ['127.0.0.1', 'localhost']

# ------------------------------
# Celery Configuration
# ------------------------------
CELERY_BROKER_URL = os.getenv('CELERY_BROKER_URL', 'redis://redis:6379/0')       # Redis container
CELERY_RESULT_BACKEND = os.getenv('CELERY_RESULT_BACKEND', 'redis://redis:6379/0')


CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': os.getenv('REDIS_URL', 'redis://redis:6379/1'),
        'OPTIONS': {
            'IGNORE_EXCEPTIONS': True,
        },
        'KEY_PREFIX': 'portal_noticias',
        'TIMEOUT': 300,
    }
}


# URL base usada nos links absolutos
FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:3000')
