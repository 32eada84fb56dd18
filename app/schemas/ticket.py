from datetime import datetime
from typing import Optional

from app.models.enums import Priority, TicketStatus
from app.schemas.common import CamelModel


class TicketCreate(CamelModel):
    # ticketNumber/status/createdAt/updatedAt are not accepted; the service assigns them
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    location: Optional[str] = None
    department: Optional[str] = None
    created_by: Optional[int] = None
    created_by_name: Optional[str] = None


class TicketOut(CamelModel):
    id: int
    ticket_number: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    location: Optional[str] = None
    department: Optional[str] = None
    status: TicketStatus
    created_by: Optional[int] = None
    created_by_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
