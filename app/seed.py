"""
Demo data for a fresh database.

Each collection is seeded only while it is empty, so running this again
after any row exists is a no-op for that collection.

    python -m app.seed
"""
import logging
from typing import Optional

from app.config import settings
from app.database import Base, SessionLocal, engine
from app.models.department import Department
from app.models.enums import Priority, Role
from app.models.ticket import Ticket  # noqa: F401  registers the tickets table
from app.models.user import User
from app.services.app_service import AppService

logger = logging.getLogger("app.seed")

DEMO_USERS = [
    # username, name, role, department
    ("citizen1", "John Doe", Role.CITIZEN, None),
    ("staff1", "Jane Smith", Role.STAFF, "SANITATION"),
    ("collector1", "Alice Brown", Role.COLLECTOR, None),
    ("admin1", "Bob White", Role.ADMIN, None),
]

DEMO_DEPARTMENTS = [
    ("SANITATION", "Sanitation Department"),
    ("WATER_SUPPLY", "Water Supply Department"),
    ("ELECTRICITY", "Electricity Department"),
]

DEMO_CITIZEN = "citizen1"

DEMO_TICKETS = [
    {
        "title": "Streetlight not working",
        "description": "Streetlight near main park is not working for a week.",
        "category": "STREETLIGHTS",
        "priority": Priority.HIGH,
        "location": "Main Park, Sector 10",
        "department": "ELECTRICITY",
    },
    {
        "title": "Garbage not collected",
        "description": "Garbage has not been collected from our area for 3 days.",
        "category": "SANITATION",
        "priority": Priority.MEDIUM,
        "location": "Block C, Apartment 5",
        "department": "SANITATION",
    },
]


def seed_demo_data(service: AppService, password: Optional[str] = None) -> dict:
    password = password or settings.SEED_PASSWORD
    created = {"users": 0, "departments": 0, "tickets": 0}

    if service.users.count() == 0:
        hashed = service.hasher.hash(password)
        for username, name, role, department in DEMO_USERS:
            service.users.save(User(
                username=username,
                password_hash=hashed,
                role=role,
                name=name,
                department=department,
            ))
            created["users"] += 1

    if service.departments.count() == 0:
        for dept_id, name in DEMO_DEPARTMENTS:
            service.departments.save(Department(id=dept_id, name=name))
            created["departments"] += 1

    if service.tickets.count() == 0:
        citizen = service.users.first_by(username=DEMO_CITIZEN)
        if citizen is None:
            logger.warning("Skipping demo tickets: user %s not found", DEMO_CITIZEN)
        else:
            for fields in DEMO_TICKETS:
                service.create_ticket({
                    **fields,
                    "created_by": citizen.id,
                    "created_by_name": citizen.name,
                })
                created["tickets"] += 1

    logger.info(
        "Seed finished: %d users, %d departments, %d tickets created",
        created["users"], created["departments"], created["tickets"],
    )
    return created


def bootstrap(seed: bool = True) -> dict:
    """Create tables and, when asked, seed demo rows. Called once at process start."""
    Base.metadata.create_all(bind=engine)
    if not seed:
        return {"users": 0, "departments": 0, "tickets": 0}

    db = SessionLocal()
    try:
        return seed_demo_data(AppService(db))
    finally:
        db.close()


if __name__ == "__main__":
    from app.logging_config import setup_logging

    setup_logging()
    bootstrap(seed=True)
