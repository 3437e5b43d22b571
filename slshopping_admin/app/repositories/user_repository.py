"""
Storage for console users.

A user's roles live in the ``users_roles`` join table.  Saving a user
replaces its role assignments with the roles carried by the model.
"""

import sqlite3
from typing import Dict, List, Optional

from slshopping_admin.app.core.db import get_connection
from slshopping_admin.app.schemas.user import Role, User

_SELECT = "SELECT id, email, password, name, enabled FROM users"


class UserRepository:
    def find_all(self) -> List[User]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY id").fetchall()
            return self._rows_to_users(conn, rows)
        finally:
            conn.close()

    def search(self, keyword: str) -> List[User]:
        pattern = f"%{keyword}%"
        conn = get_connection()
        try:
            rows = conn.execute(
                f"{_SELECT} WHERE email LIKE ? OR name LIKE ? ORDER BY id",
                (pattern, pattern),
            ).fetchall()
            return self._rows_to_users(conn, rows)
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[User]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE email = ? ORDER BY id LIMIT 1", (email,)).fetchone()
            return self._rows_to_users(conn, [row])[0] if row else None
        finally:
            conn.close()

    def find_by_id(self, user_id: int) -> Optional[User]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE id = ?", (user_id,)).fetchone()
            return self._rows_to_users(conn, [row])[0] if row else None
        finally:
            conn.close()

    def save(self, user: User) -> User:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            values = (user.email, user.password, user.name, int(user.enabled))
            if user.id is None:
                cursor.execute(
                    "INSERT INTO users (email, password, name, enabled) VALUES (?, ?, ?, ?)",
                    values,
                )
                user_id = cursor.lastrowid
            else:
                cursor.execute(
                    "INSERT INTO users (id, email, password, name, enabled) VALUES (?, ?, ?, ?, ?) "
                    "ON CONFLICT(id) DO UPDATE SET email = excluded.email, "
                    "password = excluded.password, name = excluded.name, "
                    "enabled = excluded.enabled, updated_at = CURRENT_TIMESTAMP",
                    (user.id, *values),
                )
                user_id = user.id
            cursor.execute("DELETE FROM users_roles WHERE user_id = ?", (user_id,))
            cursor.executemany(
                "INSERT INTO users_roles (user_id, role_id) VALUES (?, ?)",
                [(user_id, role.id) for role in user.roles],
            )
            conn.commit()
            return user.model_copy(update={"id": user_id})
        finally:
            conn.close()

    def delete(self, user_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _rows_to_users(conn: sqlite3.Connection, rows: List[sqlite3.Row]) -> List[User]:
        if not rows:
            return []
        ids = [row["id"] for row in rows]
        placeholders = ", ".join("?" for _ in ids)
        role_rows = conn.execute(
            f"""
            SELECT ur.user_id, r.id, r.code, r.display_name
            FROM users_roles ur JOIN roles r ON r.id = ur.role_id
            WHERE ur.user_id IN ({placeholders})
            ORDER BY r.id
            """,
            ids,
        ).fetchall()
        roles_by_user: Dict[int, List[Role]] = {}
        for role_row in role_rows:
            roles_by_user.setdefault(role_row["user_id"], []).append(
                Role(id=role_row["id"], code=role_row["code"], display_name=role_row["display_name"])
            )
        return [
            User(
                id=row["id"],
                email=row["email"],
                password=row["password"],
                name=row["name"],
                enabled=bool(row["enabled"]),
                roles=roles_by_user.get(row["id"], []),
            )
            for row in rows
        ]
