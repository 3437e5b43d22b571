"""
Storage for products.

Reads join the referenced category and brand so list and detail
screens can show their names.  Keyword search matches the product name
or description.
"""

import sqlite3
from typing import List, Optional

from slshopping_admin.app.core.db import get_connection
from slshopping_admin.app.schemas.product import Product

_SELECT = """
    SELECT p.id, p.name, p.description, p.in_stock, p.price, p.cost,
           p.discount_price, p.shipping_fee, p.image_path,
           p.category_id, p.brand_id,
           c.name AS category_name, b.name AS brand_name
    FROM products p
    LEFT JOIN categories c ON c.id = p.category_id
    LEFT JOIN brands b ON b.id = p.brand_id
"""

_COLUMNS = (
    "name",
    "description",
    "in_stock",
    "price",
    "cost",
    "discount_price",
    "shipping_fee",
    "image_path",
    "category_id",
    "brand_id",
)


class ProductRepository:
    def find_all(self) -> List[Product]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY p.id").fetchall()
            return [self._row_to_product(row) for row in rows]
        finally:
            conn.close()

    def search(self, keyword: str) -> List[Product]:
        pattern = f"%{keyword}%"
        conn = get_connection()
        try:
            rows = conn.execute(
                f"{_SELECT} WHERE p.name LIKE ? OR p.description LIKE ? ORDER BY p.id",
                (pattern, pattern),
            ).fetchall()
            return [self._row_to_product(row) for row in rows]
        finally:
            conn.close()

    def find_by_name(self, name: str) -> Optional[Product]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE p.name = ? ORDER BY p.id LIMIT 1", (name,)).fetchone()
            return self._row_to_product(row) if row else None
        finally:
            conn.close()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE p.id = ?", (product_id,)).fetchone()
            return self._row_to_product(row) if row else None
        finally:
            conn.close()

    def save(self, product: Product) -> Product:
        values = [getattr(product, column) for column in _COLUMNS]
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if product.id is None:
                placeholders = ", ".join("?" for _ in _COLUMNS)
                cursor.execute(
                    f"INSERT INTO products ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
                    values,
                )
                product_id = cursor.lastrowid
            else:
                assignments = ", ".join(f"{column} = excluded.{column}" for column in _COLUMNS)
                placeholders = ", ".join("?" for _ in range(len(_COLUMNS) + 1))
                cursor.execute(
                    f"INSERT INTO products (id, {', '.join(_COLUMNS)}) VALUES ({placeholders}) "
                    f"ON CONFLICT(id) DO UPDATE SET {assignments}, updated_at = CURRENT_TIMESTAMP",
                    [product.id, *values],
                )
                product_id = product.id
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE p.id = ?", (product_id,)).fetchone()
            return self._row_to_product(row)
        finally:
            conn.close()

    def delete(self, product_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM products WHERE id = ?", (product_id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_product(row: sqlite3.Row) -> Product:
        return Product(**dict(row))
