from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from app.models.enums import Role
from app.schemas.common import parse_status
from app.schemas.ticket import TicketCreate, TicketOut
from app.services.app_service import AppService, get_service
from app.utils.auth import require_roles
from app.utils.excel_export import XLSX_MEDIA_TYPE, make_filename, rows_to_xlsx_bytes, ticket_rows
from app.utils.request_body import bare_string_body

import logging
logger = logging.getLogger("app.tickets")


router = APIRouter(prefix="/api/tickets", tags=["Tickets"])

require_triage = require_roles(Role.STAFF, Role.COLLECTOR, Role.ADMIN)
require_reporting = require_roles(Role.COLLECTOR, Role.ADMIN)


@router.post("", response_model=TicketOut)
def create_ticket(body: TicketCreate, service: AppService = Depends(get_service)):
    return service.create_ticket(body.model_dump(exclude_unset=True))


# one read mode only: userId wins over department, otherwise everything
@router.get("", response_model=list[TicketOut])
def list_tickets(
    user_id: Optional[int] = Query(None, alias="userId"),
    department: Optional[str] = Query(None),
    service: AppService = Depends(get_service),
):
    if user_id is not None:
        return service.get_tickets_by_creator(user_id)
    if department is not None:
        return service.get_tickets_by_department(department)
    return service.get_all_tickets()


# must stay above /{ticket_id}
@router.get("/export")
def export_tickets(
    service: AppService = Depends(get_service),
    user=Depends(require_reporting),
):
    xlsx_bytes = rows_to_xlsx_bytes(ticket_rows(service.get_all_tickets()), sheet_name="Tickets")
    filename = make_filename("tickets")
    logger.info("User id=%s exported tickets", user.id)

    return StreamingResponse(
        iter([xlsx_bytes]),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{ticket_id}", response_model=TicketOut)
def get_ticket(ticket_id: int, service: AppService = Depends(get_service)):
    return service.get_ticket(ticket_id)


@router.put("/{ticket_id}/status", response_model=TicketOut)
def update_ticket_status(
    ticket_id: int,
    raw_status: str = Depends(bare_string_body),
    service: AppService = Depends(get_service),
    user=Depends(require_triage),
):
    status = parse_status(raw_status)
    return service.update_ticket_status(ticket_id, status)
