"""Demo data bootstrap."""

from app.models.enums import Priority, Role, TicketStatus
from app.seed import seed_demo_data


def test_seed_on_empty_store(service):
    created = seed_demo_data(service)

    assert created == {"users": 4, "departments": 3, "tickets": 2}
    assert service.users.count() == 4
    assert service.departments.count() == 3

    citizen = service.users.first_by(username="citizen1")
    tickets = sorted(service.get_all_tickets(), key=lambda t: t.id)
    assert [(t.department, t.priority) for t in tickets] == [
        ("ELECTRICITY", Priority.HIGH),
        ("SANITATION", Priority.MEDIUM),
    ]
    for t in tickets:
        assert t.status == TicketStatus.OPEN
        assert t.created_by == citizen.id
        assert t.created_by_name == "John Doe"
        assert t.ticket_number.startswith("TKT")


def test_seed_one_user_per_role(service):
    seed_demo_data(service)

    roles = sorted(u.role.value for u in service.get_all_users())
    assert roles == sorted(r.value for r in Role)
    assert service.users.first_by(username="staff1").department == "SANITATION"


def test_seeded_accounts_share_password(service):
    seed_demo_data(service, password="demo-pass")

    for username in ("citizen1", "staff1", "collector1", "admin1"):
        assert service.login(username, "demo-pass").username == username


def test_sanitation_tickets_after_seed(seeded):
    tickets = seeded.get_tickets_by_department("SANITATION")

    assert len(tickets) == 1
    assert tickets[0].title == "Garbage not collected"


def test_seed_is_idempotent(seeded):
    again = seed_demo_data(seeded)

    assert again == {"users": 0, "departments": 0, "tickets": 0}
    assert seeded.users.count() == 4
    assert seeded.departments.count() == 3
    assert seeded.tickets.count() == 2


def test_seed_skips_non_empty_collections_only(service):
    service.register("someone", "pw", "Someone")

    created = seed_demo_data(service)

    # users table was not empty, so no demo citizen and therefore no demo tickets
    assert created == {"users": 0, "departments": 3, "tickets": 0}
    assert service.users.count() == 1
