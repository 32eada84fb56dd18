from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from app.database import Base
from app.models.enums import Priority, TicketStatus


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)

    # display id, not unique-constrained
    ticket_number = Column(String(32), index=True)

    title = Column(String(200))
    description = Column(Text)
    category = Column(String(50))
    priority = Column(Enum(Priority, native_enum=False, length=20))
    location = Column(String(255))

    # free-text Department.id
    department = Column(String(50), index=True)

    status = Column(Enum(TicketStatus, native_enum=False, length=20), nullable=False)

    created_by = Column(Integer, index=True)
    created_by_name = Column(String(100))

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
