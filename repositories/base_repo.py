"""
repositories/base_repo.py
-------------------------
Shared CRUD behaviour for the single-table repositories.

Every repository exposes the same four operations:
    find_all, find_by_id, save, delete_by_id

`save` resolves the entity into exactly one `Insert` or `Update` action
(see `plan_save`) and runs the matching path. Update and delete look the
row up first and raise `EntityNotFoundError` when it is missing, so the
caller never has to interpret a zero row count. The lookup and the write
are separate statements; a concurrent delete between them is not guarded.
"""

from dataclasses import dataclass, replace
from typing import Any, Generic, Optional, TypeVar, Union

from psycopg2 import extras, sql

from db.connection import Database
from repositories.exceptions import EntityNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Insert(Generic[T]):
    """Persist a transient entity and return a copy with its new id."""
    entity: T


@dataclass(frozen=True)
class Update(Generic[T]):
    """Overwrite the stored row `entity_id` with the entity's fields."""
    entity: T
    entity_id: int


SaveAction = Union[Insert, Update]


def plan_save(entity: Any) -> SaveAction:
    """Pick the save path from the presence of the entity's id."""
    if entity.id is None:
        return Insert(entity)
    return Update(entity, entity.id)


class BaseRepository(Generic[T]):
    """
    Base class for repositories backed by one table with a generated `id`.

    Subclasses provide:
        table: Table name.
        entity_name: Human-readable name used in errors and logs.
        _FIND_ALL_SQL / _FIND_BY_ID_SQL: SELECT statements returning the
            columns `_row_to_entity` expects.
        _row_to_entity: The row mapper.
        _columns: Column -> value mapping for every mutable column.
    """

    table: str
    entity_name: str
    _FIND_ALL_SQL: str
    _FIND_BY_ID_SQL: str

    def __init__(self, db: Database):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[T]:
        """Fetch every row of the table, ordered by id."""
        with self.db.connection() as conn:
            with self._cursor(conn) as cur:
                cur.execute(self._FIND_ALL_SQL)
                return [self._row_to_entity(r) for r in cur.fetchall()]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """
        Fetch a single entity by primary key.

        Returns:
            The entity, or None if no row has this id.
        """
        with self.db.connection() as conn:
            with self._cursor(conn) as cur:
                cur.execute(self._FIND_BY_ID_SQL, (entity_id,))
                row = cur.fetchone()
                return self._row_to_entity(row) if row else None

    # ── SAVE ──────────────────────────────────────────────

    def save(self, entity: T) -> T:
        """
        Insert the entity when it has no id, otherwise update the stored row.

        Returns:
            For an insert, a copy of the entity carrying the generated id.
            For an update, the entity itself.

        Raises:
            EntityNotFoundError: If the entity has an id with no stored row.
        """
        self._validate(entity)
        action = plan_save(entity)
        if isinstance(action, Update):
            return self._update(action)
        return self._insert(action)

    def _insert(self, action: Insert[T]) -> T:
        values = self._insert_values(action.entity)
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING id").format(
            table=sql.Identifier(self.table),
            columns=sql.SQL(", ").join(sql.Identifier(c) for c in values),
            values=sql.SQL(", ").join([sql.Placeholder()] * len(values)),
        )
        with self.db.connection() as conn:
            try:
                with self._cursor(conn) as cur:
                    cur.execute(query, list(values.values()))
                    new_id = cur.fetchone()["id"]
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to insert {self.entity_name}: {e}")
                raise
        logger.info(f"Inserted {self.entity_name} #{new_id}")
        return replace(action.entity, id=new_id)

    def _update(self, action: Update[T]) -> T:
        self._require_existing(action.entity_id)
        values = self._update_values(action.entity)
        query = sql.SQL("UPDATE {table} SET {assignments} WHERE id = %s").format(
            table=sql.Identifier(self.table),
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(c)) for c in values
            ),
        )
        self._execute_write(
            query,
            [*values.values(), action.entity_id],
            f"update {self.entity_name} #{action.entity_id}",
        )
        return action.entity

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, entity_id: int) -> None:
        """
        Delete the row with the given id.

        Raises:
            EntityNotFoundError: If no row has this id.
        """
        self._require_existing(entity_id)
        self._delete(entity_id)

    def _delete(self, entity_id: int) -> None:
        query = sql.SQL("DELETE FROM {table} WHERE id = %s").format(
            table=sql.Identifier(self.table),
        )
        self._execute_write(query, (entity_id,), f"delete {self.entity_name} #{entity_id}")
        logger.info(f"Deleted {self.entity_name} #{entity_id}")

    # ── HOOKS ─────────────────────────────────────────────

    def _validate(self, entity: T) -> None:
        """Reject entities that cannot be stored. No-op by default."""

    def _columns(self, entity: T) -> dict[str, Any]:
        raise NotImplementedError

    def _insert_values(self, entity: T) -> dict[str, Any]:
        return self._columns(entity)

    def _update_values(self, entity: T) -> dict[str, Any]:
        return self._columns(entity)

    @staticmethod
    def _row_to_entity(row: dict) -> T:
        raise NotImplementedError

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _cursor(conn):
        return conn.cursor(cursor_factory=extras.RealDictCursor)

    def _require_existing(self, entity_id: int) -> T:
        found = self.find_by_id(entity_id)
        if found is None:
            logger.warning(f"{self.entity_name} #{entity_id} not found")
            raise EntityNotFoundError(self.entity_name, entity_id)
        return found

    def _execute_write(self, query, params, description: str) -> int:
        """Run one write statement in its own transaction and return the row count."""
        with self.db.connection() as conn:
            try:
                with self._cursor(conn) as cur:
                    cur.execute(query, params)
                    affected = cur.rowcount
                conn.commit()
                return affected
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to {description}: {e}")
                raise
