# models/__init__.py
from .base import Base

# --- Local (SQLite) ---
from .preferencia import Preferencia

# --- Remotos (API REST) ---
from .tablero import Tablero, EstadoTablero
from .perfil import Perfil, PERFIL
