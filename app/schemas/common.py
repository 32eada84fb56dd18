from enum import Enum
from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.errors import InvalidEnumError
from app.models.enums import Role, TicketStatus

EnumT = TypeVar("EnumT", bound=Enum)


class CamelModel(BaseModel):
    # wire format is camelCase (ticketNumber, createdBy ...), python side snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def clean_bare_string(raw: str) -> str:
    # bodies arrive as RESOLVED or "RESOLVED"
    return raw.strip().replace('"', "")


def parse_enum(enum_cls: Type[EnumT], raw: str) -> EnumT:
    value = clean_bare_string(raw)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidEnumError(f"Invalid {enum_cls.__name__} '{value}', expected one of: {allowed}")


def parse_status(raw: str) -> TicketStatus:
    return parse_enum(TicketStatus, raw)


def parse_role(raw: str) -> Role:
    return parse_enum(Role, raw)
