"""
Shared implementation for tables that only hold an id and a name.

Categories and brands have the same shape and the same queries; the
concrete repositories only name their table and model.
"""

import sqlite3
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from slshopping_admin.app.core.db import get_connection

ModelT = TypeVar("ModelT", bound=BaseModel)


class NamedEntityRepository(Generic[ModelT]):
    """CRUD and search over a ``(id, name)`` table."""

    table: str
    model: Type[ModelT]

    def find_all(self) -> List[ModelT]:
        conn = get_connection()
        try:
            rows = conn.execute(f"SELECT id, name FROM {self.table} ORDER BY id").fetchall()
            return [self._to_model(row) for row in rows]
        finally:
            conn.close()

    def search(self, keyword: str) -> List[ModelT]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT id, name FROM {self.table} WHERE name LIKE ? ORDER BY id",
                (f"%{keyword}%",),
            ).fetchall()
            return [self._to_model(row) for row in rows]
        finally:
            conn.close()

    def find_by_name(self, name: str) -> Optional[ModelT]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT id, name FROM {self.table} WHERE name = ? ORDER BY id LIMIT 1",
                (name,),
            ).fetchone()
            return self._to_model(row) if row else None
        finally:
            conn.close()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT id, name FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            return self._to_model(row) if row else None
        finally:
            conn.close()

    def save(self, entity: ModelT) -> ModelT:
        """Insert ``entity`` when it has no id, update it otherwise.

        An entity carrying an id that is not in the table is inserted
        under that id.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if entity.id is None:
                cursor.execute(f"INSERT INTO {self.table} (name) VALUES (?)", (entity.name,))
                entity_id = cursor.lastrowid
            else:
                cursor.execute(
                    f"INSERT INTO {self.table} (id, name) VALUES (?, ?) "
                    "ON CONFLICT(id) DO UPDATE SET name = excluded.name",
                    (entity.id, entity.name),
                )
                entity_id = entity.id
            conn.commit()
            return entity.model_copy(update={"id": entity_id})
        finally:
            conn.close()

    def delete(self, entity_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
            conn.commit()
        finally:
            conn.close()

    def _to_model(self, row: sqlite3.Row) -> ModelT:
        return self.model(id=row["id"], name=row["name"])
