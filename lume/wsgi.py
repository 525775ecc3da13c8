"""WSGI config for the LUME API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lume.settings")

application = get_wsgi_application()
