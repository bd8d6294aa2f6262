"""módulo de base de datos: handle explícito de engine + sesiones.

No hay engine global. La aplicación construye un ``Database`` en ``create_app`` y lo
guarda en ``app.state.database``; ``get_db`` abre una sesión por request a partir de él.
"""
from typing import Generator
import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .models import Base
from core.utils import mask_database_url

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    """SQLite ignora ON DELETE CASCADE/SET NULL sin este pragma."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _is_sqlite_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///") or ":memory:" in url


class Database:
    """Handle de acceso a datos: engine + fábrica de sesiones."""

    def __init__(self, url: str, echo: bool = False):
        """
        Args:
            url: URL SQLAlchemy de la base de datos
            echo: Loguear SQL emitido (solo desarrollo)
        """
        self.url = url
        self.engine = self._build_engine(url, echo)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

    @staticmethod
    def _build_engine(url: str, echo: bool) -> Engine:
        options = {"echo": echo, "pool_pre_ping": True}
        if url.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
            if _is_sqlite_memory(url):
                # una sola conexión compartida: si no, cada conexión ve una BD vacía
                options["poolclass"] = StaticPool
        else:
            options["pool_recycle"] = 3600  # recicla conexiones cada hora

        engine = create_engine(url, **options)
        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    @property
    def masked_url(self) -> str:
        """URL de la base de datos sin credenciales sensibles."""
        return mask_database_url(str(self.engine.url))

    def session(self) -> Session:
        """Abre una nueva sesión."""
        return self.SessionLocal()

    def create_tables(self) -> None:
        """Crear tablas ORM en la base de datos.

        Raises:
            SQLAlchemyError: Si hay error al crear las tablas
        """
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info(f"Tablas creadas/verificadas en {self.masked_url}")
        except SQLAlchemyError as e:
            logger.error(f"Error al crear tablas: {e}", exc_info=True)
            raise

    def drop_tables(self) -> None:
        """Elimina todas las tablas ORM (usado por el reset de datos de ejemplo)."""
        Base.metadata.drop_all(bind=self.engine)
        logger.warning(f"Tablas eliminadas en {self.masked_url}")

    def ping(self) -> bool:
        """Verifica la conexión con un SELECT 1."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error de conexión a BD: {e}")
            return False

    def dispose(self) -> None:
        """Cierra todas las conexiones del pool."""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """dependencia de FastAPI que provee una sesión por request.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión siempre, con éxito o con error
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()
