"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach real Stripe or Postgres
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_fake_key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SITE_DOMAIN", "http://redhope.test")
os.environ.setdefault("REQUIRE_AUTH_TOKEN", "false")
