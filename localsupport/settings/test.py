"""
Test settings for the LocalSupport directory.

Runs against an in-memory SQLite database with a fast password hasher so
the pytest suite needs no external services.
"""
from .base import *  # noqa

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
ORGANISATIONS_PER_PAGE = 500
