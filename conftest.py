"""Global pytest configuration."""

import os

# Settings are read when backend.app.main is imported; keep them off PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
