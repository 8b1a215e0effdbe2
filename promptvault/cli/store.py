# promptvault/cli/store.py
"""
CLI commands for store maintenance.

Usage:
    promptvault status
    promptvault export --output backup.json
    promptvault import backup.json --confirm
    promptvault get-setting version_cleanup_threshold
    promptvault set-setting version_cleanup_threshold 50
    promptvault seed
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_db_session():
    """Open a session on the configured store, initializing it if needed."""
    from promptvault.config import ensure_data_dir
    from promptvault.database import get_engine, get_session_factory, init_db

    ensure_data_dir()
    init_db(get_engine())
    return get_session_factory()()


def cmd_status(args):
    """Show store location, counts and retention threshold."""
    from sqlalchemy import func

    from promptvault.config import get_settings
    from promptvault.models import Prompt, PromptVersion
    from promptvault.services.retention import get_cleanup_threshold
    from promptvault.services.settings_service import list_settings

    db = get_db_session()
    try:
        prompt_count = db.query(func.count(Prompt.id)).scalar() or 0
        version_count = db.query(func.count(PromptVersion.id)).scalar() or 0
        pinned_count = db.query(func.count(Prompt.id)).filter(Prompt.pinned.is_(True)).scalar() or 0

        print("\n=== Store Status ===\n")
        print(f"Store: {get_settings().database_url}")
        print(f"Prompts: {prompt_count} ({pinned_count} pinned)")
        print(f"Versions: {version_count}")
        print(f"Version cleanup threshold: {get_cleanup_threshold(db)}")

        print("\nSettings:")
        for key, value in list_settings(db).items():
            print(f"  {key}: {value}")
        print()
    finally:
        db.close()


def cmd_export(args):
    """Write a full snapshot as JSON."""
    from promptvault.services.transfer_service import export_all

    db = get_db_session()
    try:
        data = export_all(db)
        payload = data.model_dump_json(indent=2)

        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"Exported {len(data.prompts)} prompts to {args.output}")
        else:
            print(payload)
    finally:
        db.close()


def cmd_import(args):
    """Replace the store contents with a snapshot file."""
    from pydantic import ValidationError

    from promptvault.exceptions import StorageError
    from promptvault.schemas.transfer import ExportData
    from promptvault.services.transfer_service import import_all

    # Safety check
    if not args.confirm:
        print("Error: Import replaces every prompt and version; re-run with --confirm")
        sys.exit(1)

    path = Path(args.file)
    if not path.exists():
        print(f"Error: File '{path}' not found")
        sys.exit(1)

    try:
        data = ExportData.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        print(f"Error: '{path}' is not a valid export file")
        print(e)
        sys.exit(1)

    db = get_db_session()
    try:
        import_all(db, data)
        version_count = sum(len(p.versions) for p in data.prompts)
        print(f"Imported {len(data.prompts)} prompts, {version_count} versions, {len(data.settings)} settings")
    except StorageError as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        db.close()


def cmd_get_setting(args):
    from promptvault.services.settings_service import get_setting

    db = get_db_session()
    try:
        value = get_setting(db, args.key)
        if value is None:
            print(f"{args.key} is not set")
            sys.exit(1)
        print(value)
    finally:
        db.close()


def cmd_set_setting(args):
    from promptvault.models import VERSION_CLEANUP_THRESHOLD_KEY
    from promptvault.services.retention import set_cleanup_threshold
    from promptvault.services.settings_service import set_setting

    db = get_db_session()
    try:
        if args.key == VERSION_CLEANUP_THRESHOLD_KEY:
            try:
                set_cleanup_threshold(db, int(args.value))
            except ValueError:
                print(f"Error: {args.key} must be an integer >= 1")
                sys.exit(1)
        else:
            set_setting(db, args.key, args.value)
        print(f"{args.key} = {args.value}")
    finally:
        db.close()


def cmd_seed(args):
    """Add the built-in sample prompts."""
    from promptvault.samples import SAMPLE_PROMPTS, seed_sample_prompts

    db = get_db_session()
    try:
        created = seed_sample_prompts(db)
        print(f"Added {len(created)} sample prompts ({len(SAMPLE_PROMPTS) - len(created)} already present)")
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="promptvault",
        description="PromptVault Store Management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check current status
  promptvault status

  # Back up the store
  promptvault export --output backup.json

  # Restore from a backup (destructive)
  promptvault import backup.json --confirm

  # Keep at most 50 versions per prompt
  promptvault set-setting version_cleanup_threshold 50
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # status command
    status_parser = subparsers.add_parser("status", help="Show store status")
    status_parser.set_defaults(func=cmd_status)

    # export command
    export_parser = subparsers.add_parser("export", help="Export prompts, versions and settings as JSON")
    export_parser.add_argument("--output", "-o", help="Write to this file instead of stdout")
    export_parser.set_defaults(func=cmd_export)

    # import command
    import_parser = subparsers.add_parser("import", help="Replace the store with an export file")
    import_parser.add_argument("file", help="Export file to import")
    import_parser.add_argument("--confirm", action="store_true", help="Confirm destructive replace")
    import_parser.set_defaults(func=cmd_import)

    # get-setting command
    get_parser = subparsers.add_parser("get-setting", help="Print a setting value")
    get_parser.add_argument("key", help="Setting key")
    get_parser.set_defaults(func=cmd_get_setting)

    # set-setting command
    set_parser = subparsers.add_parser("set-setting", help="Upsert a setting value")
    set_parser.add_argument("key", help="Setting key")
    set_parser.add_argument("value", help="New value")
    set_parser.set_defaults(func=cmd_set_setting)

    # seed command
    seed_parser = subparsers.add_parser("seed", help="Add the built-in sample prompts")
    seed_parser.set_defaults(func=cmd_seed)

    args = parser.parse_args(argv)

    from promptvault.config import get_settings
    from promptvault.logging_config import configure_logging

    settings = get_settings()
    configure_logging(json_format=settings.LOG_JSON, level=settings.LOG_LEVEL)

    args.func(args)


if __name__ == "__main__":
    main()
