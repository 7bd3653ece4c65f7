from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from study_dashboard.core.config import settings


def make_engine(url: str) -> Engine:
    """
    Engine for the status store. Lookups are two short read-only queries, so a
    plain sync engine is enough.

    SQLite (the local default) is opened with check_same_thread off: FastAPI
    runs sync routes in a threadpool, and the session from get_db may be used
    on a different thread than the one that created the connection.
    """
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = make_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
