from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from .settings import get_settings

settings = get_settings()

def _engine_kwargs(url: str) -> dict:
    if make_url(url).get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}
    # One shared connection so an in-memory database survives across sessions
    return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}

# Create the SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# SQLite only enforces REFERENCES/ON DELETE when asked to, per connection
@event.listens_for(engine, "connect")
def _enable_sqlite_fks(dbapi_conn, _record):
    if engine.dialect.name == "sqlite":
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys = ON;")
        cur.close()

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
