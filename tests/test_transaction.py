import pytest

from mariadbpp.transaction import SavePoint, Transaction
from mariadbpp.types import IsolationLevel


class FakeConnection:
    def __init__(self):
        self.log = []

    def execute(self, query):
        self.log.append(query)
        return 0

    def commit(self):
        self.log.append("COMMIT")

    def rollback(self):
        self.log.append("ROLLBACK")


@pytest.fixture
def conn():
    return FakeConnection()


def test_start_statements_default(conn):
    Transaction(conn)
    assert conn.log == [
        "SET TRANSACTION ISOLATION LEVEL REPEATABLE READ;",
        "START TRANSACTION;",
    ]


def test_start_statements_serializable_snapshot(conn):
    Transaction(conn, IsolationLevel.SERIALIZABLE, True)
    assert conn.log == [
        "SET TRANSACTION ISOLATION LEVEL SERIALIZABLE;",
        "START TRANSACTION WITH CONSISTENT SNAPSHOT;",
    ]


def test_commit_ends_transaction(conn):
    trx = Transaction(conn)
    trx.commit()
    trx.commit()
    trx.rollback()
    assert conn.log[2:] == ["COMMIT"]
    assert not trx.active
    assert trx.create_save_point() is None


def test_context_rolls_back_without_commit(conn):
    with Transaction(conn):
        conn.execute("INSERT")
    assert conn.log[-1] == "ROLLBACK"


def test_context_after_commit_does_not_roll_back(conn):
    with Transaction(conn) as trx:
        trx.commit()
    assert "ROLLBACK" not in conn.log


def test_save_point_commit_releases(conn):
    trx = Transaction(conn)
    sp = trx.create_save_point()
    assert sp.name.startswith("SP")
    assert conn.log[-1] == "SAVEPOINT " + sp.name
    sp.commit()
    assert conn.log[-1] == "RELEASE SAVEPOINT " + sp.name
    assert not sp.active


def test_save_point_context_rolls_back(conn):
    trx = Transaction(conn)
    with trx.create_save_point() as sp:
        pass
    assert conn.log[-1] == "ROLLBACK TO SAVEPOINT " + sp.name
    sp.commit()
    assert conn.log[-1] == "ROLLBACK TO SAVEPOINT " + sp.name


def test_save_point_names_unique(conn):
    trx = Transaction(conn)
    names = {trx.create_save_point().name for _ in range(5)}
    assert len(names) == 5


def test_commit_detaches_save_points(conn):
    trx = Transaction(conn)
    sp = trx.create_save_point()
    trx.commit()
    count = len(conn.log)
    sp.rollback()
    assert len(conn.log) == count
    assert not sp.active


def test_save_point_on_ended_transaction_raises(conn):
    trx = Transaction(conn)
    trx.rollback()
    with pytest.raises(ValueError):
        SavePoint(trx)