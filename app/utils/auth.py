from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from app.config import settings
from app.errors import NotFoundError
from app.models.enums import Role
from app.models.user import User
from app.services.app_service import AppService, get_service

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")


def create_access_token(data: dict, expires_minutes: int = None) -> str:
    to_encode = data.copy()
    minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def token_for(user: User) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role.value})


def get_current_user(
    token: str = Depends(oauth2_scheme),
    service: AppService = Depends(get_service),
) -> User:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        subject = payload.get("sub")
        if subject is None:
            raise HTTPException(status_code=401, detail="Invalid token")
        return service.get_user(int(subject))
    except (JWTError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid authentication token")
    except NotFoundError:
        raise HTTPException(status_code=401, detail="User not found")


def require_roles(*roles: Role):
    """Dependency factory: the current user must hold one of `roles`."""

    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise HTTPException(status_code=403, detail="Insufficient role")
        return user

    return checker


require_admin = require_roles(Role.ADMIN)
