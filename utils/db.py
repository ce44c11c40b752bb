# utils/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session
from config import DATABASE_URI
from models.base import Base

# SQLite local: solo guarda preferencias de la app
engine = create_engine(
    DATABASE_URI,
    future=True,
    echo=False,
    connect_args={"check_same_thread": False},
)

SessionLocal = scoped_session(sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
))

def init_db():
    """Crea las tablas locales si no existen."""
    import models.preferencia  # noqa: F401  registra el mapeo
    Base.metadata.create_all(bind=engine)
