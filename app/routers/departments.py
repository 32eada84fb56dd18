from fastapi import APIRouter, Depends, HTTPException, Response

from app.models.enums import Role
from app.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from app.services.app_service import AppService, get_service
from app.utils.auth import require_roles

import logging
logger = logging.getLogger("app.departments")

router = APIRouter(prefix="/api/departments", tags=["Departments"])

require_department_admin = require_roles(Role.COLLECTOR, Role.ADMIN)


@router.get("", response_model=list[DepartmentOut])
def list_departments(service: AppService = Depends(get_service)):
    return service.get_all_departments()


@router.post("", response_model=DepartmentOut, status_code=201)
def create_department(
    body: DepartmentCreate,
    service: AppService = Depends(get_service),
    admin=Depends(require_department_admin),
):
    return service.create_department(body.id, body.name)


@router.put("/{department_id}", response_model=DepartmentOut)
def update_department(
    department_id: str,
    body: DepartmentUpdate,
    service: AppService = Depends(get_service),
    admin=Depends(require_department_admin),
):
    return service.update_department(department_id, body.name)


@router.delete("/{department_id}", status_code=204)
def delete_department(
    department_id: str,
    service: AppService = Depends(get_service),
    admin=Depends(require_department_admin),
):
    if not service.delete_department(department_id):
        raise HTTPException(status_code=404, detail="Department not found")
    return Response(status_code=204)
