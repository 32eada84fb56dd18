from fastapi import APIRouter, Depends

from app.schemas.common import clean_bare_string, parse_role
from app.schemas.user import UserOut
from app.services.app_service import AppService, get_service
from app.utils.auth import require_admin
from app.utils.request_body import bare_string_body

import logging
logger = logging.getLogger("app.admin")


router = APIRouter(prefix="/api/users", tags=["Users"])


# UserOut drops password hashes
@router.get("", response_model=list[UserOut])
def list_users(
    service: AppService = Depends(get_service),
    admin=Depends(require_admin),
):
    return service.get_all_users()


@router.put("/{user_id}/role", response_model=UserOut)
def update_user_role(
    user_id: int,
    raw_role: str = Depends(bare_string_body),
    service: AppService = Depends(get_service),
    admin=Depends(require_admin),
):
    role = parse_role(raw_role)
    return service.update_user_role(user_id, role)


# empty body unassigns; the department id is not checked
@router.put("/{user_id}/department", response_model=UserOut)
def update_user_department(
    user_id: int,
    raw_department: str = Depends(bare_string_body),
    service: AppService = Depends(get_service),
    admin=Depends(require_admin),
):
    department_id = clean_bare_string(raw_department)
    return service.update_user_department(user_id, department_id or None)
