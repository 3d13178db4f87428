# src/codemmunity/scripts/migrate.py
"""Apply Alembic migrations up to head."""
from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path

from alembic import command
from alembic.config import Config

from codemmunity.core.logging import configure_logging
from codemmunity.core.settings import settings

# Shipped inside the package so installed copies can migrate too.
MIGRATIONS_DIR = Path(str(files("codemmunity.migrations")))

logger = logging.getLogger(__name__)


def build_config(database_url: str | None = None, migrations_dir: Path = MIGRATIONS_DIR) -> Config:
    """Return an Alembic config pointing at the packaged migrations.

    Args:
        database_url: Database to migrate; defaults to the application settings.
        migrations_dir: Directory holding ``env.py`` and ``versions/``.
    """
    cfg = Config(str(migrations_dir / "alembic.ini"))
    cfg.set_main_option("script_location", str(migrations_dir))
    if database_url is not None:
        cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def run_upgrade_head(database_url: str | None = None) -> None:
    """Upgrade the database to the latest revision."""
    configure_logging(settings.log_level)
    logger.info("Upgrading database schema to head")
    command.upgrade(build_config(database_url), "head")


if __name__ == "__main__":
    run_upgrade_head()
