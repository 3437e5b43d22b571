#!/usr/bin/env python3
"""
Reset a console user's password in the SL Shopping SQLite database.

This script does not read or reveal any existing password.  It sets a
new PBKDF2 hash (format "salthex$hashhex", the same as the console
writes) for the user with the given e-mail address.

Usage:
    python reset_password.py --db ./slshopping_admin/slshopping.db --email admin@example.com --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sqlite3
import sys

from slshopping_admin.app.core.security import hash_password


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reset an SL Shopping console user's password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./slshopping_admin/slshopping.db)")
    ap.add_argument("--email", required=True, help="E-mail address of the user to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    conn = sqlite3.connect(args.db)
    try:
        cur = conn.cursor()
        row = cur.execute("SELECT id FROM users WHERE email = ?", (args.email,)).fetchone()
        if not row:
            print(f"[!] No user found with email: {args.email}", file=sys.stderr)
            return 2

        cur.execute(
            "UPDATE users SET password = ?, updated_at = CURRENT_TIMESTAMP WHERE email = ?",
            (hash_password(new_password), args.email),
        )
        conn.commit()
        print(f"[+] Password updated for user: {args.email}")
        return 0
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
