"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.application.unit_of_work import AbstractUnitOfWork

from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyDeliveryNoteRepository,
    SqlAlchemyPricingProfileRepository,
)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work over one SQLAlchemy session.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._delivery_note_repository: Optional[SqlAlchemyDeliveryNoteRepository] = None
        self._customer_repository: Optional[SqlAlchemyCustomerRepository] = None
        self._pricing_profile_repository: Optional[SqlAlchemyPricingProfileRepository] = None

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._delivery_note_repository = None
        self._customer_repository = None
        self._pricing_profile_repository = None
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then release the session."""
        try:
            await super().__aexit__(exc_type, exc_val, exc_tb)
        finally:
            await self._session.close()
            self._session = None

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def delivery_notes(self) -> SqlAlchemyDeliveryNoteRepository:
        session = self._require_session()
        if self._delivery_note_repository is None:
            self._delivery_note_repository = SqlAlchemyDeliveryNoteRepository(session)
        return self._delivery_note_repository

    @property
    def customers(self) -> SqlAlchemyCustomerRepository:
        session = self._require_session()
        if self._customer_repository is None:
            self._customer_repository = SqlAlchemyCustomerRepository(session)
        return self._customer_repository

    @property
    def pricing_profiles(self) -> SqlAlchemyPricingProfileRepository:
        session = self._require_session()
        if self._pricing_profile_repository is None:
            self._pricing_profile_repository = SqlAlchemyPricingProfileRepository(session)
        return self._pricing_profile_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self._require_session().commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self._require_session().rollback()


def create_uow(session_factory: async_sessionmaker) -> SqlAlchemyUnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        SqlAlchemyUnitOfWork instance
    """
    return SqlAlchemyUnitOfWork(session_factory)
