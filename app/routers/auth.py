from fastapi import APIRouter, Depends

from app.models.user import User
from app.schemas.user import LoginOut, UserCreate, UserLogin, UserOut
from app.services.app_service import AppService, get_service
from app.utils.auth import get_current_user, token_for

import logging
logger = logging.getLogger("app.auth")


router = APIRouter(prefix="/api", tags=["Auth"])


# login: unknown user and wrong password are the same 401
@router.post("/login", response_model=LoginOut)
def login(body: UserLogin, service: AppService = Depends(get_service)):
    user = service.login(body.username, body.password)
    out = UserOut.model_validate(user)
    return LoginOut(**out.model_dump(), access_token=token_for(user))


# register: always a CITIZEN with no department
@router.post("/register", response_model=UserOut, status_code=201)
def register(body: UserCreate, service: AppService = Depends(get_service)):
    return service.register(body.username, body.password, body.name)


@router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
