from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobboard.core.config import settings


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite connections are used across FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(create_tables: bool = False):
    """
    Initialize database.

    Schema is owned by Alembic ("alembic upgrade head"); this registers the
    models on Base.metadata. create_tables=True is for SQLite dev runs only.
    """
    from jobboard.models import company, job, application  # noqa: F401 - register models

    if create_tables:
        Base.metadata.create_all(bind=engine)
