#!/usr/bin/env python3
"""Seed the catalog with the Istanbul -> London demo network and default users.

Locations: TAKSIM, IST, SAW, LHR, WEMBLEY
Edges:
    BUS, SUBWAY  TAKSIM -> IST       every day
    BUS          TAKSIM -> SAW       every day
    FLIGHT       IST    -> LHR       Mon, Wed, Fri, Sun
    FLIGHT       SAW    -> LHR       Tue, Thu, Sat
    UBER, BUS    LHR    -> WEMBLEY   every day

Usage:
    # Create tables (if missing) and seed everything
    python scripts/seed_catalog.py --create-tables

    # Only the users
    python scripts/seed_catalog.py --users-only

    # Custom passwords
    python scripts/seed_catalog.py --admin-password s3cret --agency-password s3cret2

Existing locations (by code), edges (same endpoints and type) and users
(by username) are left untouched, so the script can be re-run safely.
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Dict

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv()

from sqlalchemy.orm import Session

from core.containers import CatalogContainer
from core.database import SessionLocal, create_all_tables
from src.auth_bc.user.domain.entities import UserRole
from src.auth_bc.user.infrastructure.models import UserModel
from src.auth_bc.user.infrastructure.repositories import UserRepository
from src.auth_bc.user.infrastructure.services import PasswordHasher
from src.catalog_bc.location.application.commands import CreateLocationCommand
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.transportation.application.commands import CreateTransportationCommand
from src.catalog_bc.transportation.domain.entities.transportation import TransportationType
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository
from src.framework.application import CommandBus

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ALL_DAYS = [1, 2, 3, 4, 5, 6, 7]

LOCATIONS = [
    # (code, name, country, city, display_order)
    ("TAKSIM", "Taksim Square", "Turkey", "Istanbul", 1),
    ("IST", "Istanbul Airport", "Turkey", "Istanbul", 2),
    ("SAW", "Sabiha Gokcen Airport", "Turkey", "Istanbul", 3),
    ("LHR", "London Heathrow Airport", "United Kingdom", "London", 4),
    ("WEMBLEY", "Wembley Stadium", "United Kingdom", "London", 5),
]

TRANSPORTATIONS = [
    # (origin code, destination code, type, operating days)
    ("TAKSIM", "IST", TransportationType.BUS, ALL_DAYS),
    ("TAKSIM", "IST", TransportationType.SUBWAY, ALL_DAYS),
    ("TAKSIM", "SAW", TransportationType.BUS, ALL_DAYS),
    ("IST", "LHR", TransportationType.FLIGHT, [1, 3, 5, 7]),
    ("SAW", "LHR", TransportationType.FLIGHT, [2, 4, 6]),
    ("LHR", "WEMBLEY", TransportationType.UBER, ALL_DAYS),
    ("LHR", "WEMBLEY", TransportationType.BUS, ALL_DAYS),
]


def seed_locations(db: Session, command_bus: CommandBus) -> Dict[str, object]:
    """Create missing locations; returns code -> location id for every fixture code."""
    repository = LocationRepository(db)
    ids = {}
    for code, name, country, city, display_order in LOCATIONS:
        existing = repository.get_by_code(code)
        if existing:
            logger.info(f"Location {code} already exists, skipping")
            ids[code] = existing.id
            continue
        location = command_bus.dispatch(CreateLocationCommand(
            name=name, country=country, city=city, code=code, display_order=display_order
        ))
        ids[code] = location.id
    return ids


def seed_transportations(db: Session, command_bus: CommandBus, location_ids: Dict[str, object]) -> int:
    repository = TransportationRepository(db)
    existing = {
        (m.origin_location_id, m.destination_location_id, m.transportation_type)
        for m in repository.get_all()
    }
    created = 0
    for origin, destination, transportation_type, days in TRANSPORTATIONS:
        key = (location_ids[origin], location_ids[destination], transportation_type.value)
        if key in existing:
            logger.info(f"{transportation_type.value} {origin} -> {destination} already exists, skipping")
            continue
        command_bus.dispatch(CreateTransportationCommand(
            origin_location_id=location_ids[origin],
            destination_location_id=location_ids[destination],
            transportation_type=transportation_type,
            operating_days=days,
        ))
        created += 1
    return created


def seed_users(db: Session, admin_password: str, agency_password: str) -> int:
    repository = UserRepository(db)
    hasher = PasswordHasher()
    created = 0
    for username, password, role in (
        ("admin", admin_password, UserRole.ADMIN),
        ("agency", agency_password, UserRole.AGENCY),
    ):
        if repository.get_by_username(username):
            logger.info(f"User {username} already exists, skipping")
            continue
        repository.create(UserModel(
            username=username,
            password_hash=hasher.hash(password),
            role=role.value,
            is_active=True,
        ))
        created += 1
    return created


def main():
    parser = argparse.ArgumentParser(
        description='Seed the flight routes catalog and default users',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--create-tables',
        action='store_true',
        help='Create missing tables first (development; production uses alembic upgrade head)'
    )
    parser.add_argument(
        '--users-only',
        action='store_true',
        help='Only create the admin and agency users'
    )
    parser.add_argument('--admin-password', default='admin123', help='Password for the "admin" user')
    parser.add_argument('--agency-password', default='agency123', help='Password for the "agency" user')
    args = parser.parse_args()

    if args.create_tables:
        create_all_tables()
        logger.info("Tables created")

    db = SessionLocal()
    try:
        users = seed_users(db, args.admin_password, args.agency_password)
        logger.info(f"Users created: {users}")

        if not args.users_only:
            command_bus = CommandBus(CatalogContainer(session=db))
            location_ids = seed_locations(db, command_bus)
            edges = seed_transportations(db, command_bus, location_ids)
            logger.info(f"Locations: {len(location_ids)}, transportations created: {edges}")
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        db.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
