"""WSGI config for the Qimma Kitchens storefront."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "qimma.settings")

application = get_wsgi_application()
