"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from gatehouse.config import Settings
from gatehouse.domain.repository import (
    BatchWriter,
    InviteRepository,
    OrganizationRepository,
    UserRepository,
)
from gatehouse.persistence.database import create_engine, create_session_factory
from gatehouse.persistence.repository import (
    SqlBatchWriter,
    SqlInviteRepository,
    SqlOrganizationRepository,
    SqlUserRepository,
)
from gatehouse.util.di.base import ProviderBase
from gatehouse.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the SQL record store."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposing its pool when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Record store connection pool disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        Write batches commit on their own before the request ends.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return SqlUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return SqlInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, session: AsyncSession
    ) -> OrganizationRepository:
        """Provide Organization repository."""
        return SqlOrganizationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_batch_writer(self, session: AsyncSession) -> BatchWriter:
        """Provide atomic write batch factory."""
        return SqlBatchWriter(session)
