"""Caterly database management CLI.

Creates and drops the database schema for the caterly domain. With the
default memory provider both commands are no-ops; point
``[tool.protean.databases.default]`` at sqlite or postgresql to use them.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from caterly.domain import caterly
    from caterly.utils.db import setup_db

    print("Initializing caterly domain...")
    caterly.init()
    print("Creating database schema...")
    touched = setup_db(caterly)
    print(f"Done: {', '.join(touched) or 'no SQL databases configured'}.")


def drop_database():
    from caterly.domain import caterly
    from caterly.utils.db import drop_db

    print("Initializing caterly domain...")
    caterly.init()
    print("Dropping database schema...")
    touched = drop_db(caterly)
    print(f"Done: {', '.join(touched) or 'no SQL databases configured'}.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Caterly database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
