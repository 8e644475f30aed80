"""Test environment — must run before anything imports ``blog.config``.

Settings are cached and the engine is built at import time, so the database,
upload directory and admin address are pinned here for the whole session.
"""

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="blog-tests-"))

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.sqlite3'}"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["UPLOAD_DIR"] = str(_TMP / "uploads")
os.environ["MAX_UPLOAD_SIZE_MB"] = "1"
os.environ["GOOGLE_TRANSLATE_API_KEY"] = ""
os.environ["GOOGLE_CLIENT_ID"] = ""
os.environ["FEED_PAGE_SIZE"] = "10"
