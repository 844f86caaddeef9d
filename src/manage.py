"""VibeCustomers database management CLI.

Creates or drops the Reviews schema on RDBMS providers (sqlite, postgresql).
The in-memory provider used in development needs neither.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from reviews.domain import reviews
    from reviews.utils.db import setup_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Creating reviews database schema...")
    setup_db(reviews)
    print("Done.")


def drop_database():
    from reviews.domain import reviews
    from reviews.utils.db import drop_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Dropping reviews database schema...")
    drop_db(reviews)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="VibeCustomers database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
