from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_sqlite_url(storage_path: str) -> str:
    return f"sqlite:///{storage_path}"


def create_sqlite_engine(storage_path: str, echo: bool = False) -> Engine:
    """
    Create an engine for a local SQLite file.

    `check_same_thread` is disabled because FastAPI runs sync endpoints
    in a threadpool; every operation still gets its own session.
    """
    engine = create_engine(
        build_sqlite_url(storage_path),
        echo=echo,
        pool_pre_ping=True,  # Test connection before using (detect disconnects)
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _on_connect)
    return engine


def _on_connect(dbapi_conn, connection_record):
    logger.debug("New database connection established")


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine):
    """
    Create all tables defined on `Base` that do not exist yet.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
