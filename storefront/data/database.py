# storefront/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.utils.settings import DATABASE_URL


def make_engine(url: str = DATABASE_URL):
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions are handed out per request thread
        connect_args = {"check_same_thread": False, "timeout": 30}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
