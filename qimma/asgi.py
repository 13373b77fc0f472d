"""ASGI config for the Qimma Kitchens storefront."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "qimma.settings")

application = get_asgi_application()
