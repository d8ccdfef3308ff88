"""Unit of Work — single commit point reporting whether anything changed.

Invariants:
    - save_all() returns True only if at least one row was inserted, updated or deleted
      since the session's last commit or rollback
    - Autoflushed changes since the last commit still count as changes
    - Commits made elsewhere on the same session do not count
    - Storage failures roll back and surface as PersistenceError; never retried

Design Decisions:
    - after_flush listener: repositories may trigger autoflush through queries,
      which empties session.new/dirty before save_all() looks at them
    - after_commit / after_soft_rollback reset the flag at transaction boundaries
"""

import logging

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.infrastructure.database import to_persistence_error

logger = logging.getLogger(__name__)


class SqlUnitOfWork:
    """Commits everything staged on one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._flushed_changes = False
        session = db.sync_session
        event.listen(session, "after_flush", self._on_flush)
        event.listen(session, "after_commit", self._on_transaction_end)
        event.listen(session, "after_soft_rollback", self._on_transaction_end)

    def _on_flush(self, session, flush_context) -> None:
        if session.new or session.deleted or any(
            session.is_modified(obj) for obj in session.dirty
        ):
            self._flushed_changes = True

    def _on_transaction_end(self, session, *args) -> None:
        self._flushed_changes = False

    def _has_pending_changes(self) -> bool:
        return bool(
            self._flushed_changes
            or self.db.new
            or self.db.deleted
            or any(self.db.is_modified(obj) for obj in self.db.dirty)
        )

    async def save_all(self) -> bool:
        """Commit staged changes. Returns whether any row changed."""
        changed = self._has_pending_changes()
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Commit failed: {e}")
            raise to_persistence_error(e) from e
        finally:
            self._flushed_changes = False
        return changed
