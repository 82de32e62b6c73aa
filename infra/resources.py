"""Infrastructure resources: the async database engine.

This module is part of the infra layer and must not import from application features.
"""
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class DatabaseResource:
    """Database resource for dependency injection."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine = None
        self.session_factory = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    async def init(self):
        """Initialize database connection."""
        if self.engine is not None:
            return self

        if self.is_sqlite:
            # A single shared connection keeps in-memory databases alive
            self.engine = create_async_engine(
                self.database_url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_async_engine(
                self.database_url,
                echo=self.echo,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        return self

    def get_session(self) -> AsyncSession:
        """Get database session (synchronous accessor)."""
        if self.session_factory is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()

    async def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        if self.engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_schema(self, base: type[DeclarativeBase]) -> None:
        """Create all tables registered on ``base.metadata``."""
        async with self.engine.begin() as conn:
            await conn.run_sync(base.metadata.create_all)

    async def drop_schema(self, base: type[DeclarativeBase]) -> None:
        """Drop all tables registered on ``base.metadata``."""
        async with self.engine.begin() as conn:
            await conn.run_sync(base.metadata.drop_all)

    async def shutdown(self):
        """Shutdown database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
