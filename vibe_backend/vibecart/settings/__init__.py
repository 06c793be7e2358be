# vibecart/settings/__init__.py
"""
Settings package entrypoint.

Nothing is imported here. Use DJANGO_SETTINGS_MODULE to select:
- vibecart.settings.dev   (local development)
- vibecart.settings.test  (test runs)
- vibecart.settings.prod  (production)
"""
