"""Required settings for the test run. Loaded by pytest before any kodbank import."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("HF_API_KEY", "hf_test_key")
os.environ.setdefault("TOKEN_RETENTION_ENABLED", "true")
