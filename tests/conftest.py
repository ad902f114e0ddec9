"""Root pytest configuration.

Test Structure:
    tests/
    ├── pennywise/
    │   └── unit/              # Fast, isolated tests
    │       ├── domain/
    │       ├── application/
    │       ├── infrastructure/
    │       └── presentation/
    ├── pennywise_config/      # Settings tests
    └── shared/                # Shared fixtures and factories

config/.env.test, when it exists, is loaded into the process environment.
Its values therefore win over a developer's config/.env.dev, but keys it
does not set still fall back to config/.env.dev. Tests that need exact
defaults build ``Settings(_env_file=None)`` with the variables cleared.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from pennywise_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
