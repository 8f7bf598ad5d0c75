from unittest import mock

import psycopg2
import pytest
from _helper import executed

from db.connection import Database
from models.passenger import Passenger
from repositories.base_repo import Insert, Update, plan_save
from repositories.exceptions import EntityNotFoundError
from repositories.passenger_repo import PassengerRepository


@pytest.fixture()
def repo(db: Database) -> PassengerRepository:
    return PassengerRepository(db)


def test_plan_save_without_id_is_insert():
    passenger = Passenger(name="Carol")
    assert plan_save(passenger) == Insert(passenger)


def test_plan_save_with_id_is_update():
    passenger = Passenger(name="Carol", id=5)
    assert plan_save(passenger) == Update(passenger, 5)


def test_find_all_empty_table(repo: PassengerRepository, cursor: mock.MagicMock):
    assert repo.find_all() == []


def test_find_all_maps_rows_in_order(repo: PassengerRepository, cursor: mock.MagicMock):
    cursor.fetchall.return_value = [{"id": 1, "name": "Carol"}, {"id": 2, "name": "Dave"}]

    assert repo.find_all() == [Passenger(id=1, name="Carol"), Passenger(id=2, name="Dave")]
    query, _ = executed(cursor)[0]
    assert "ORDER BY id" in query


def test_find_by_id_absent_returns_none(repo: PassengerRepository, cursor: mock.MagicMock):
    assert repo.find_by_id(42) is None
    assert executed(cursor) == [(PassengerRepository._FIND_BY_ID_SQL, (42,))]


def test_find_by_id_present(repo: PassengerRepository, cursor: mock.MagicMock):
    cursor.fetchone.return_value = {"id": 42, "name": "Carol"}
    assert repo.find_by_id(42) == Passenger(id=42, name="Carol")


def test_insert_returns_copy_with_generated_id(
    repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock
):
    cursor.fetchone.return_value = {"id": 7}
    passenger = Passenger(name="Carol")

    saved = repo.save(passenger)

    assert saved == Passenger(id=7, name="Carol")
    assert saved is not passenger
    assert passenger.id is None
    query, params = executed(cursor)[0]
    assert "Identifier('passengers')" in repr(query)
    assert params == ["Carol"]
    conn.commit.assert_called_once()


def test_update_existing_returns_entity_unchanged(
    repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock
):
    cursor.fetchone.return_value = {"id": 7, "name": "Old name"}
    passenger = Passenger(id=7, name="New name")

    assert repo.save(passenger) is passenger

    lookup, update = executed(cursor)
    assert lookup == (PassengerRepository._FIND_BY_ID_SQL, (7,))
    assert update[1] == ["New name", 7]
    conn.commit.assert_called_once()


def test_update_unknown_id_raises_without_writing(
    repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock
):
    with pytest.raises(EntityNotFoundError, match="Passenger with id 999 not found"):
        repo.save(Passenger(id=999, name="Ghost"))

    assert len(executed(cursor)) == 1
    conn.commit.assert_not_called()


def test_delete_existing(repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock):
    cursor.fetchone.return_value = {"id": 7, "name": "Carol"}

    repo.delete_by_id(7)

    _, delete = executed(cursor)
    assert "Identifier('passengers')" in repr(delete[0])
    assert delete[1] == (7,)
    conn.commit.assert_called_once()


def test_delete_unknown_id_raises(repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock):
    with pytest.raises(EntityNotFoundError) as exc_info:
        repo.delete_by_id(7)

    assert exc_info.value.entity_id == 7
    assert exc_info.value.error_code == "not_found"
    conn.commit.assert_not_called()


def test_write_failure_rolls_back_and_propagates(
    repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock
):
    cursor.execute.side_effect = psycopg2.OperationalError("server closed the connection")

    with pytest.raises(psycopg2.OperationalError):
        repo.save(Passenger(name="Carol"))

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()


def test_connection_returned_to_pool_after_failure(
    repo: PassengerRepository, cursor: mock.MagicMock, conn: mock.MagicMock, pool: mock.MagicMock
):
    cursor.execute.side_effect = psycopg2.OperationalError("timeout")

    with pytest.raises(psycopg2.OperationalError):
        repo.find_all()

    pool.putconn.assert_called_once_with(conn)
