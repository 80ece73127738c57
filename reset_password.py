#!/usr/bin/env python3
"""
Reset a user's password in the Task Tracker SQLite database.

This script does not read or reveal any existing passwords.  It stores a
new PBKDF2-HMAC-SHA256 hash ("salthex$hashhex") for the given username.

Usage:
    python reset_password.py --db ./task_tracker_api/task_tracker.db --username alice --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import os
import sys


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset a Task Tracker user password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./task_tracker_api/task_tracker.db)")
    ap.add_argument("--username", required=True, help="Username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        sys.exit(1)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    # Settings are read at import time, so point them at the database first.
    os.environ["DATABASE_URL"] = os.path.abspath(args.db)
    from task_tracker_api.app.core.exceptions import NotFoundError
    from task_tracker_api.app.services.user_service import UserService

    try:
        asyncio.run(UserService().reset_password(args.username, new_password))
    except NotFoundError:
        print(f"[!] No user found with username: {args.username}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Password updated for user: {args.username}")


if __name__ == "__main__":
    main()
