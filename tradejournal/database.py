"""SQLModel database engine and table setup."""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from tradejournal.config import settings

logger = logging.getLogger(__name__)

# SQLite needs check_same_thread=False; PostgreSQL does not
connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.database_url,
    echo=False,
    connect_args=connect_args,
)


def create_db_and_tables(bind: Engine | None = None):
    """Create all tables. Called on startup."""
    # Import models so metadata is populated
    from tradejournal.models import StoreEntry  # noqa: F401

    target = bind or engine
    SQLModel.metadata.create_all(target)
    logger.info(f"Store ready at {target.url.render_as_string(hide_password=True)}")
