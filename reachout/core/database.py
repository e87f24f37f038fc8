from typing import Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from reachout.core.config import settings
import logging
from contextlib import contextmanager

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create Base class for SQLAlchemy models
Base = declarative_base()

class Database:
    def __init__(self, url: Optional[str] = None):
        self._url = url
        self._engine = None
        self._session_factory = None

    @property
    def url(self) -> str:
        return self._url or str(settings.SQLALCHEMY_DATABASE_URI)

    def init_app(self):
        """Initialize database connection"""
        if not self._engine:
            if self.url.startswith("sqlite"):
                self._engine = create_engine(
                    self.url,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_engine(
                    self.url,
                    pool_pre_ping=True,
                    pool_size=5,
                    max_overflow=10,
                    pool_timeout=30
                )

            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self._engine
            )

    def _ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    async def check_connection(self) -> bool:
        """Check the store answers; runs off the event loop."""
        try:
            await run_in_threadpool(self._ping)
            return True
        except Exception as e:
            logger.error(f"Database connection check failed: {str(e)}")
            return False

    def init_db(self) -> None:
        """Initialize database with all models."""
        if not self._session_factory:
            self.init_app()

        try:
            # Import all models here so they register on Base.metadata
            import reachout.models  # noqa

            Base.metadata.create_all(bind=self._engine)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Database initialization failed: {str(e)}")
            raise

    def drop_db(self) -> None:
        """Drop every table known to the models."""
        import reachout.models  # noqa

        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self):
        """Context manager for database sessions."""
        if not self._session_factory:
            self.init_app()

        session = self._session_factory()

        try:
            yield session
            session.commit()
        except Exception as e:
            logger.error(f"Session error: {str(e)}")
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self):
        """Dispose of the current engine and session factory."""
        if self._engine:
            logger.info("Disposing database connection...")
            try:
                self._engine.dispose()
                self._engine = None
                self._session_factory = None
                logger.info("Database connection disposed successfully")
            except Exception as e:
                logger.error(f"Error disposing database connection: {str(e)}")
                raise

    @property
    def engine(self):
        """Get the SQLAlchemy engine."""
        if not self._engine:
            self.init_app()
        return self._engine


# Create global database instance
db = Database()

# Export Base and db
__all__ = ['Base', 'db', 'Database']
