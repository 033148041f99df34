# app/database.py
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

# ---------------------------------------------------------
# Postgres connection (via pooler)
#
# - sslmode=require   : enforce SSL when running in the cloud
# - pool_size=5       : connections shared by all requests
# - pool_pre_ping=True: validate connections before using them
#
# SQLite (local dev / tests) skips the pool tuning and allows the
# connection to be used from FastAPI's worker threads.
# ---------------------------------------------------------


def _normalize_url(db_url: str) -> str:
    """Append sslmode=require to Postgres URLs if it is not already present."""
    if not db_url.startswith("postgres"):
        return db_url
    if "sslmode=" in db_url:
        return db_url
    if "?" in db_url:
        return db_url + "&sslmode=require"
    return db_url + "?sslmode=require"


def build_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Create the shared SQLAlchemy engine for the given connection string.
    """
    db_url = _normalize_url(db_url)

    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        db_url,
        echo=echo,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=0,
    )


def create_db_and_tables(engine: Engine) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    # Import models so SQLModel metadata is populated before create_all()
    from app.models import blog, category, product, testimonial, user  # noqa: F401

    SQLModel.metadata.create_all(engine)
