"""Django settings for the responder example site."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = BASE_DIR.parent
load_dotenv(PROJECT_ROOT / '.env')


def _env_flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-insecure-key-change-in-production')

DEBUG = _env_flag('DJANGO_DEBUG')

ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'responder',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
    'responder.middleware.ResponderMiddleware',
]

ROOT_URLCONF = 'responder_site.urls'

# No templates or database needed - JSON-only
TEMPLATES = []
DATABASES = {}

RESPONDER = {
    'HANDLE_EXCEPTIONS': _env_flag('RESPONDER_HANDLE_EXCEPTIONS', 'true'),
    'DEBUG_ERRORS': _env_flag('RESPONDER_DEBUG_ERRORS'),
    'INCLUDE_STACK_TRACE': _env_flag('RESPONDER_INCLUDE_STACK_TRACE'),
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'responder': {
            'handlers': ['console'],
            'level': os.getenv('RESPONDER_LOG_LEVEL', 'INFO'),
        },
    },
}
