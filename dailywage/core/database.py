import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from dailywage.core.config import settings

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


def create_db_engine(url: str = None) -> Engine:
    """
    Create the SQLAlchemy engine and its connection pool.

    The engine is created once per application and handed to the
    repositories through a session factory; nothing here is global.
    """
    return create_engine(
        url or settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the session factory repositories check sessions out of."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Initialize database.

    Imports the models so they register on Base.metadata. Tables are
    normally managed by Alembic ("alembic upgrade head"); set
    AUTO_CREATE_TABLES=true to create them directly instead.
    """
    from dailywage.models import user, profile  # noqa: F401  Import models to register them

    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")


def check_connection(engine: Engine) -> None:
    """Run a trivial query; raises if the store is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
