"""Boundary parsing of bare enum strings."""

import pytest

from app.errors import InvalidEnumError
from app.models.enums import Role, TicketStatus
from app.schemas.common import clean_bare_string, parse_role, parse_status


@pytest.mark.parametrize("raw, expected", [
    ("OPEN", TicketStatus.OPEN),
    ('"IN_PROGRESS"', TicketStatus.IN_PROGRESS),
    ('  "CLOSED"\n', TicketStatus.CLOSED),
])
def test_parse_status(raw, expected):
    assert parse_status(raw) is expected


def test_parse_role():
    assert parse_role('"COLLECTOR"') is Role.COLLECTOR


@pytest.mark.parametrize("raw", ["", "open", "DONE"])
def test_unknown_status_rejected(raw):
    with pytest.raises(InvalidEnumError):
        parse_status(raw)


def test_unknown_role_rejected():
    with pytest.raises(InvalidEnumError) as exc:
        parse_role('"ADMINS"')

    assert "CITIZEN" in exc.value.detail


def test_clean_bare_string_empty_means_unassign():
    assert clean_bare_string('""') == ""
