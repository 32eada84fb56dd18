import enum


class Role(str, enum.Enum):
    CITIZEN = "CITIZEN"
    STAFF = "STAFF"
    COLLECTOR = "COLLECTOR"
    ADMIN = "ADMIN"


class Priority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TicketStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"
