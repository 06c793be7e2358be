# vibecart/wsgi.py
"""
WSGI config for the vibecart project.
Defaults to dev settings unless DJANGO_SETTINGS_MODULE is set externally.

Production MUST set DJANGO_SETTINGS_MODULE=vibecart.settings.prod.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vibecart.settings.dev")

application = get_wsgi_application()
