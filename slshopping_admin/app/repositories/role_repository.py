"""Read-only storage for the seeded roles."""

from typing import List

from slshopping_admin.app.core.db import get_connection
from slshopping_admin.app.schemas.user import Role


class RoleRepository:
    def find_all(self) -> List[Role]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, code, display_name FROM roles ORDER BY id").fetchall()
            return [Role(id=row["id"], code=row["code"], display_name=row["display_name"]) for row in rows]
        finally:
            conn.close()
