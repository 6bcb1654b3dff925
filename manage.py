#!/usr/bin/env python3
"""
Salon Stock management CLI.

Usage:
    python manage.py migrate             Apply pending database migrations
    python manage.py db-status           Show applied and pending migrations
    python manage.py verify              Run schema integrity checks
    python manage.py seed FILE.json      Load suppliers, products and stock levels
    python manage.py serve               Start the API server
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from salonstock.infrastructure.storage.sqlite.migrations import initialize_database

    results = asyncio.run(
        initialize_database(args.db_path, create_backup_before=not args.no_backup)
    )
    if not results:
        print("Database is up to date.")
    for result in results:
        state = "SUCCESS" if result.success else "FAILED"
        print(f"[{state}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")
    if any(not r.success for r in results):
        sys.exit(1)


def cmd_db_status(args: argparse.Namespace) -> None:
    """Show migration status."""
    from salonstock.infrastructure.storage.sqlite.migrations import get_migration_status

    status = asyncio.run(get_migration_status(args.db_path))
    print(f"Database exists:    {status['exists']}")
    print(f"Current version:    {status.get('current_version') or 'N/A'}")
    print(f"Applied migrations: {status.get('applied_migrations', [])}")
    print(f"Pending migrations: {status.get('pending_migrations', [])}")


def cmd_verify(args: argparse.Namespace) -> None:
    """Run integrity checks and exit non-zero on failure."""
    from salonstock.infrastructure.storage.sqlite.migrations import verify_schema_integrity

    checks = asyncio.run(verify_schema_integrity(args.db_path))
    failed = False
    for check in checks:
        print(f"[{check['status']}] {check['check']}")
        if check["status"] != "PASS":
            failed = True
            for key, value in check.items():
                if key not in ("check", "status"):
                    print(f"       {key}: {value}")
    if failed:
        sys.exit(1)


async def _seed(path: Path, db_path: Path | None) -> dict[str, int]:
    from salonstock.core.entities import InventoryRecord, Product, Supplier
    from salonstock.infrastructure.storage.sqlite import (
        close_pool,
        get_catalog_store,
        get_inventory_store,
        open_pool,
    )
    from salonstock.infrastructure.storage.sqlite.migrations import initialize_database

    data = json.loads(path.read_text(encoding="utf-8"))

    await initialize_database(db_path, create_backup_before=False)
    await open_pool(db_path)
    try:
        catalog = await get_catalog_store()
        inventory = await get_inventory_store()

        for raw in data.get("suppliers", []):
            await catalog.create_supplier(Supplier.model_validate(raw))
        for raw in data.get("products", []):
            await catalog.create_product(Product.model_validate(raw))
        for raw in data.get("inventory", []):
            await inventory.upsert_record(InventoryRecord.model_validate(raw))
    finally:
        await close_pool()

    return {
        "suppliers": len(data.get("suppliers", [])),
        "products": len(data.get("products", [])),
        "inventory": len(data.get("inventory", [])),
    }


def cmd_seed(args: argparse.Namespace) -> None:
    """Load a JSON file with suppliers, products and inventory records."""
    if not args.file.exists():
        print(f"File not found: {args.file}")
        sys.exit(1)
    counts = asyncio.run(_seed(args.file, args.db_path))
    for kind, count in counts.items():
        print(f"  {kind}: {count}")


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API server in the foreground."""
    import uvicorn

    print(f"Starting server on {args.host}:{args.port}...")
    print(f"  API docs:  http://{args.host}:{args.port}/docs (debug only)")
    uvicorn.run(
        "salonstock.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(ROOT_DIR),
    )


def main() -> None:
    from salonstock.config import configure_logging, get_settings

    settings = get_settings()
    configure_logging()

    parser = argparse.ArgumentParser(
        description="Salon Stock management CLI",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_migrate = sub.add_parser("migrate", help="Apply pending migrations")
    p_migrate.add_argument("--db-path", type=Path, default=None)
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip backup")
    p_migrate.set_defaults(func=cmd_migrate)

    p_status = sub.add_parser("db-status", help="Show migration status")
    p_status.add_argument("--db-path", type=Path, default=None)
    p_status.set_defaults(func=cmd_db_status)

    p_verify = sub.add_parser("verify", help="Run schema integrity checks")
    p_verify.add_argument("--db-path", type=Path, default=None)
    p_verify.set_defaults(func=cmd_verify)

    p_seed = sub.add_parser("seed", help="Load catalog and stock levels from JSON")
    p_seed.add_argument("file", type=Path)
    p_seed.add_argument("--db-path", type=Path, default=None)
    p_seed.set_defaults(func=cmd_seed)

    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=settings.api.host)
    p_serve.add_argument("--port", type=int, default=settings.api.port)
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
