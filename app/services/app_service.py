import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.errors import ConflictError, NotFoundError, UnauthorizedError
from app.models.department import Department
from app.models.enums import Role, TicketStatus
from app.models.ticket import Ticket
from app.models.user import User
from app.store import Store
from app.utils.hashing import PasswordHasher

logger = logging.getLogger("app.service")

# fields a caller may supply when filing a ticket; everything else is assigned here
TICKET_INPUT_FIELDS = (
    "title",
    "description",
    "category",
    "priority",
    "location",
    "department",
    "created_by",
    "created_by_name",
)


class AppService:
    """
    Business rules for users, tickets and departments.

    Holds no state of its own: every call reads from and writes to the
    stores, and nothing here checks who the caller is.
    """

    def __init__(
        self,
        db: Session,
        hasher: Optional[PasswordHasher] = None,
        clock: Callable[[], datetime] = datetime.now,
        ticket_prefix: Optional[str] = None,
    ):
        self.users = Store(db, User)
        self.tickets = Store(db, Ticket)
        self.departments = Store(db, Department)
        self.hasher = hasher or PasswordHasher()
        self.clock = clock
        self.ticket_prefix = ticket_prefix or settings.TICKET_NUMBER_PREFIX

    # ---------- auth ----------

    def login(self, username: str, password: str) -> User:
        user = self.users.first_by(username=username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Failed login for username=%s", username)
            raise UnauthorizedError("Invalid credentials")
        return user

    def register(self, username: str, password: str, name: Optional[str]) -> User:
        if self.users.first_by(username=username) is not None:
            raise ConflictError("Username already exists")

        user = User(
            username=username,
            password_hash=self.hasher.hash(password),
            name=name,
            role=Role.CITIZEN,
            department=None,
        )
        try:
            user = self.users.save(user)
        except IntegrityError:
            # lost a race with a concurrent registration of the same name
            self.users.rollback()
            raise ConflictError("Username already exists")
        logger.info("Registered user id=%s username=%s", user.id, user.username)
        return user

    # ---------- tickets ----------

    def _next_ticket_number(self, now: datetime) -> str:
        # millisecond resolution: two tickets in the same tick share a number
        return f"{self.ticket_prefix}{int(now.timestamp() * 1000)}"

    def create_ticket(self, fields: Mapping[str, Any]) -> Ticket:
        ticket = Ticket(**{k: fields[k] for k in TICKET_INPUT_FIELDS if k in fields})

        now = self.clock()
        ticket.ticket_number = self._next_ticket_number(now)
        ticket.status = TicketStatus.OPEN
        ticket.created_at = now
        ticket.updated_at = now

        ticket = self.tickets.save(ticket)
        logger.info(
            "Created ticket id=%s number=%s department=%s",
            ticket.id, ticket.ticket_number, ticket.department,
        )
        return ticket

    def get_ticket(self, ticket_id: int) -> Ticket:
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            raise NotFoundError(f"Ticket not found: {ticket_id}")
        return ticket

    def update_ticket_status(self, ticket_id: int, status: TicketStatus) -> Ticket:
        ticket = self.get_ticket(ticket_id)
        old_status = ticket.status

        # any status may move to any other status
        ticket.status = status
        ticket.updated_at = self.clock()
        ticket = self.tickets.save(ticket)

        logger.info("Ticket id=%s status %s -> %s", ticket.id, old_status.value, status.value)
        return ticket

    def get_all_tickets(self) -> list[Ticket]:
        return self.tickets.all()

    def get_tickets_by_creator(self, user_id: int) -> list[Ticket]:
        return self.tickets.find_by(created_by=user_id)

    def get_tickets_by_department(self, department: str) -> list[Ticket]:
        return self.tickets.find_by(department=department)

    # ---------- departments ----------

    def get_all_departments(self) -> list[Department]:
        return self.departments.all()

    def create_department(self, department_id: str, name: str) -> Department:
        department = self.departments.merge(Department(id=department_id, name=name))
        logger.info("Saved department id=%s", department.id)
        return department

    def update_department(self, department_id: str, name: str) -> Department:
        department = self.departments.get(department_id)
        if department is None:
            raise NotFoundError(f"Department not found: {department_id}")
        department.name = name
        return self.departments.save(department)

    def delete_department(self, department_id: str) -> bool:
        # users/tickets that still point at it are left dangling
        department = self.departments.get(department_id)
        if department is None:
            return False
        self.departments.delete(department)
        logger.info("Deleted department id=%s", department_id)
        return True

    # ---------- users ----------

    def get_all_users(self) -> list[User]:
        return self.users.all()

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")
        return user

    def update_user_role(self, user_id: int, role: Role) -> User:
        user = self.get_user(user_id)
        user.role = role
        user = self.users.save(user)
        logger.info("User id=%s role -> %s", user.id, role.value)
        return user

    def update_user_department(self, user_id: int, department_id: Optional[str]) -> User:
        user = self.get_user(user_id)
        user.department = department_id or None
        user = self.users.save(user)
        logger.info("User id=%s department -> %s", user.id, user.department)
        return user


def get_service(db: Session = Depends(get_db)) -> AppService:
    return AppService(db)
