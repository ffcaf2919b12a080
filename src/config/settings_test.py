"""Settings used by the test suite.

Provides the values that ``config.settings`` refuses to default
(``SECRET_KEY``) and pins the cache to local memory.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

CPF_STRICT_VALIDATION = False
