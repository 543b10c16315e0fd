#!/usr/bin/env python3
"""Migration script to move legacy round labels into the ``round`` field.

Saves written before rounds existed kept the round label of a transaction in
``contextValue``. Loading already copies it over in memory; this script
rewrites the stored document so the legacy field is no longer needed:

- ``round`` is set from ``contextValue`` where ``round`` is empty
- ``contextValue`` is removed

Usage:
    python migrations/migrate_backfill_rounds.py [--db-path PATH]
"""

import sys
from pathlib import Path

# Add src to path so we can import leaguebook modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from leaguebook.database.factories import create_sqlite_storage
from leaguebook.database.mappers import migrate_transaction_document


def backfill_rounds(document: dict) -> int:
    """Rewrite legacy transaction records in place.

    Args:
        document: Stored state document

    Returns:
        Number of transaction records that changed
    """
    changed = 0
    migrated = []
    for record in document.get("transactions", []):
        if "contextValue" not in record:
            migrated.append(record)
            continue
        updated = migrate_transaction_document(record)
        updated.pop("contextValue", None)
        migrated.append(updated)
        changed += 1
    document["transactions"] = migrated
    return changed


def migrate_database(database_path: str | None = None) -> None:
    """Migrate the stored state document.

    Args:
        database_path: Path to database file. If None, uses default location.

    Raises:
        Exception: If migration fails
    """
    storage = create_sqlite_storage(database_path=database_path)
    storage.connect()

    try:
        document = storage.load_document()
        if document is None:
            print("Nothing to migrate: no saved state found")
            return

        print("Starting migration: moving legacy round labels...")
        changed = backfill_rounds(document)
        if changed == 0:
            print("Migration already applied: no legacy round labels found")
            return

        storage.save_document(document)
        print(f"  Updated {changed} transaction(s)")
        print("Migration completed successfully!")

    except Exception as e:
        print(f"Migration failed: {e}")
        raise
    finally:
        storage.disconnect()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Migrate stored state to keep round labels in the round field"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (overrides LEAGUEBOOK_DB_PATH environment variable)",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
