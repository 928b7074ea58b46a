from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

connect_args = {}
if settings.database_url.startswith("sqlite"):
    # Needed for SQLite in multi-threaded FastAPI
    connect_args["check_same_thread"] = False

engine = create_engine(settings.database_url, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def get_db():
    """Yield a database session and make sure it is always closed.

    Query helpers in `crud` are responsible for commit / rollback.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
