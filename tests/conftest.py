"""Shared pytest configuration."""

import os

# Point the module-level engine at SQLite before the app is imported.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
