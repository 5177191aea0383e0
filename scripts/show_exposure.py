#!/usr/bin/env python3
"""
Show which content types the stored preferences expose over REST.

What it does
- Reads the stored content type preferences from the option store
- Registers the built-in types plus any --type slugs, then fires init
- Prints the resolved show_in_rest / rest_base / controller per type
- Optionally exports the same table as CSV

Requirements
- google-cloud-firestore (for --backend firestore)
- A service account or ADC with read access to the Firestore database

Usage examples
# Firestore-backed options
python scripts/show_exposure.py --backend firestore --project my-project

# Extra custom types registered by the host
python scripts/show_exposure.py --type book --type movie --csv exposure.csv

# Try preferences without touching storage
python scripts/show_exposure.py --enable book --disable page --type book
"""
from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from typing import Dict, List

from rest_exposed.config import get_settings
from rest_exposed.plugin import RestApiExposed, bootstrap
from rest_exposed.services.options import InMemoryOptionStore, OptionStore

FIELDS = ["slug", "show_in_rest", "rest_base", "rest_controller_class", "state"]


def build_store(args: argparse.Namespace, namespace: str) -> OptionStore:
    if args.backend == "firestore":
        from google.cloud import firestore
        from rest_exposed.services.firestore import FirestoreOptionStore

        client = firestore.Client(project=args.project or None, database=args.database)
        return FirestoreOptionStore(collection=args.collection, client=client)

    store = InMemoryOptionStore()
    slugs = list(dict.fromkeys(args.enable + args.disable))
    if slugs:
        store.update_option(namespace, slugs)
    for slug in args.enable:
        store.update_option(f"{namespace}_{slug}", 1)
    for slug in args.disable:
        store.update_option(f"{namespace}_{slug}", 0)
    return store


def rows(plugin: RestApiExposed) -> List[Dict[str, object]]:
    out: List[Dict[str, object]] = []
    for ct in plugin.registry:
        state = plugin.enabled_post_types.get(ct.slug)
        out.append({
            "slug": ct.slug,
            "show_in_rest": ct.show_in_rest,
            "rest_base": ct.rest_base,
            "rest_controller_class": ct.rest_controller_class,
            "state": state.value if state else "",
        })
    return out


def write_csv(path: Path, table: List[Dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(table)


def print_table(table: List[Dict[str, object]]) -> None:
    widths = {k: max(len(k), *(len(str(r[k])) for r in table)) for k in FIELDS} if table else {}
    print("  ".join(k.ljust(widths.get(k, len(k))) for k in FIELDS))
    for r in table:
        print("  ".join(str(r[k]).ljust(widths[k]) for k in FIELDS))


def main() -> None:
    parser = argparse.ArgumentParser(description="Show resolved REST exposure per content type")
    parser.add_argument("--backend", choices=["memory", "firestore"], default="memory")
    parser.add_argument("--project", default="", help="GCP project for Firestore")
    parser.add_argument("--database", default="(default)", help="Firestore database id")
    parser.add_argument("--collection", default="options", help="Firestore collection holding options")
    parser.add_argument("--type", dest="types", action="append", default=[], help="Extra content type slug to register")
    parser.add_argument("--enable", action="append", default=[], help="(memory backend) slug to store as enabled")
    parser.add_argument("--disable", action="append", default=[], help="(memory backend) slug to store as disabled")
    parser.add_argument("--csv", dest="csv_path", default="", help="Write the table to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.backend == "firestore" and (args.enable or args.disable):
        parser.error("--enable/--disable only apply to the memory backend")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = get_settings()
    store = build_store(args, settings.OPTION_NAMESPACE)
    plugin = bootstrap(settings, store, custom_types=args.types)

    table = rows(plugin)
    if not plugin.is_active:
        print("No stored preferences: registry left at host defaults.\n")
    print_table(table)

    if args.csv_path:
        write_csv(Path(args.csv_path), table)
        print(f"\nWrote {len(table)} rows to {args.csv_path}")


if __name__ == "__main__":
    main()
