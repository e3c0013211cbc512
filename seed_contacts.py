#!/usr/bin/env python3
"""
Seed the contacts database with sample records.

Applies pending migrations, then inserts a few sample contacts.
Contacts whose email already exists are skipped, so the script can be
run repeatedly.

Usage:
    python seed_contacts.py --db ./contacts.db
    python seed_contacts.py --db ./contacts.db --email ann@acme.io --name "Ann Lee"
"""

import argparse
import asyncio
import os
import sys
from typing import Dict, List

from contact_manager_api.app.core.db import Database, init_db
from contact_manager_api.app.core.errors import ConflictError, ContactError, ValidationError
from contact_manager_api.app.schemas.contact import validate_create
from contact_manager_api.app.services.contact_service import ContactService

SAMPLE_CONTACTS: List[Dict[str, str]] = [
    {"email": "ann.lee@acme.io", "name": "Ann Lee", "phone": "555-1000", "company": "Acme"},
    {"email": "bo.chen@globex.io", "name": "Bo Chen", "company": "Globex"},
    {"email": "cara.diaz@initech.io", "name": "Cara Diaz", "phone": "555-2300"},
]


async def seed(database: Database, records: List[Dict[str, str]]) -> int:
    """Insert ``records`` and return how many were created."""
    init_db(database)
    service = ContactService(database)
    created = 0
    for record in records:
        try:
            contact = await service.create(validate_create(record))
        except ConflictError:
            print(f"[=] Skipping existing contact: {record.get('email')}")
            continue
        print(f"[+] Created contact {contact.id}: {contact.email}")
        created += 1
    return created


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the contacts database (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./contacts.db)")
    ap.add_argument("--email", help="Seed a single contact with this email instead of the samples")
    ap.add_argument("--name", help="Name of the single contact (required with --email)")
    ap.add_argument("--phone", help="Phone of the single contact")
    ap.add_argument("--company", help="Company of the single contact")
    args = ap.parse_args()

    if args.email:
        records = [{
            key: value
            for key, value in {
                "email": args.email,
                "name": args.name,
                "phone": args.phone,
                "company": args.company,
            }.items()
            if value is not None
        }]
    else:
        records = SAMPLE_CONTACTS

    try:
        created = asyncio.run(seed(Database(os.path.abspath(args.db)), records))
    except ValidationError as exc:
        print(f"[!] Invalid contact: {exc.message}", file=sys.stderr)
        sys.exit(2)
    except ContactError as exc:
        print(f"[!] Seeding failed: {exc.message}", file=sys.stderr)
        sys.exit(1)

    print(f"[OK] Seeded {created} contact(s) into {args.db}")


if __name__ == "__main__":
    main()
