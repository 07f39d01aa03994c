"""Transactions and save points on a connection."""

from __future__ import annotations

import itertools
from typing import Protocol

from .types import IsolationLevel

_ISOLATION_LEVEL = {
    IsolationLevel.REPEATABLE_READ: "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ;",
    IsolationLevel.READ_COMMITTED: "SET TRANSACTION ISOLATION LEVEL READ COMMITTED;",
    IsolationLevel.READ_UNCOMMITTED: "SET TRANSACTION ISOLATION LEVEL READ UNCOMMITTED;",
    IsolationLevel.SERIALIZABLE: "SET TRANSACTION ISOLATION LEVEL SERIALIZABLE;",
}

_START = "START TRANSACTION;"
_START_SNAPSHOT = "START TRANSACTION WITH CONSISTENT SNAPSHOT;"

_SAVE_POINT_CREATE = "SAVEPOINT "
_SAVE_POINT_ROLLBACK = "ROLLBACK TO SAVEPOINT "
_SAVE_POINT_RELEASE = "RELEASE SAVEPOINT "

_save_point_ids = itertools.count(1)


class Connection(Protocol):
    """What a transaction needs from a connection."""

    def execute(self, query: str) -> object: ...

    def commit(self) -> object: ...

    def rollback(self) -> object: ...


class Transaction:
    """A transaction that rolls back unless committed."""

    def __init__(
        self,
        connection: Connection,
        level: IsolationLevel = IsolationLevel.REPEATABLE_READ,
        consistent_snapshot: bool = False,
    ) -> None:
        self._connection: Connection | None = connection
        self._save_points: list[SavePoint] = []
        connection.execute(_ISOLATION_LEVEL[IsolationLevel(level)])
        connection.execute(_START_SNAPSHOT if consistent_snapshot else _START)

    @property
    def connection(self) -> Connection | None:
        """The connection, or None once the transaction has ended."""
        return self._connection

    @property
    def active(self) -> bool:
        return self._connection is not None

    def _cleanup(self) -> None:
        for save_point in self._save_points:
            save_point._transaction = None
        self._save_points.clear()

    def commit(self) -> None:
        """Commit and end the transaction; does nothing if already ended."""
        if self._connection is None:
            return
        self._connection.commit()
        self._cleanup()
        self._connection = None

    def rollback(self) -> None:
        """Roll back and end the transaction; does nothing if already ended."""
        if self._connection is None:
            return
        self._connection.rollback()
        self._cleanup()
        self._connection = None

    def create_save_point(self) -> SavePoint | None:
        """Create a save point, or return None if the transaction has ended."""
        if self._connection is None:
            return None
        save_point = SavePoint(self)
        self._save_points.append(save_point)
        return save_point

    def _remove_save_point(self, save_point: SavePoint) -> None:
        if save_point in self._save_points:
            self._save_points.remove(save_point)

    def __enter__(self) -> Transaction:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.rollback()
        return False


class SavePoint:
    """A named save point that rolls back to itself unless committed."""

    def __init__(self, transaction: Transaction) -> None:
        if transaction.connection is None:
            raise ValueError("transaction has already ended")
        self._transaction: Transaction | None = transaction
        self.name = f"SP{next(_save_point_ids)}"
        transaction.connection.execute(_SAVE_POINT_CREATE + self.name)

    @property
    def active(self) -> bool:
        return self._transaction is not None

    def _finish(self, statement: str) -> None:
        transaction = self._transaction
        if transaction is None:
            return
        transaction._remove_save_point(self)
        self._transaction = None
        if transaction.connection is not None:
            transaction.connection.execute(statement + self.name)

    def commit(self) -> None:
        """Release the save point, keeping its changes."""
        self._finish(_SAVE_POINT_RELEASE)

    def rollback(self) -> None:
        """Roll back to the save point."""
        self._finish(_SAVE_POINT_ROLLBACK)

    def __enter__(self) -> SavePoint:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.rollback()
        return False