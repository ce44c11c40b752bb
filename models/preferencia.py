from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from .base import Base

class Preferencia(Base):
    __tablename__ = "preferencia"
    clave = Column(String(80), primary_key=True)
    valor = Column(String(255), nullable=False)
    actualizado_en = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
