# utils/logging_config.py
import logging

from config import settings

_configurado = False


def configure_logging(log_file: str | None = None, level: str | None = None):
    """Archivo + consola, una sola vez por proceso."""
    global _configurado
    if _configurado:
        return
    nivel = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(
        filename=log_file or settings.log_file,
        level=nivel,
        format="%(asctime)s %(levelname)s %(message)s"
    )
    console = logging.StreamHandler()
    console.setLevel(nivel)
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logging.getLogger("").addHandler(console)
    _configurado = True
