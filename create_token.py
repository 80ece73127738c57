"""Print a long-lived access token for an existing user.

Usage:
    python create_token.py alice [--days 365]
"""
import argparse

from task_tracker_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue an access token for a username.")
    ap.add_argument("username", help="Username to put in the token subject")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default 365)")
    args = ap.parse_args()
    print(create_access_token({"sub": args.username}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
