"""WSGI config for the responder example site."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'responder_site.settings')

application = get_wsgi_application()
