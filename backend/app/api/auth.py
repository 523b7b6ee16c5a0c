import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.models.user import CurrentUser, LoginRequest, Token, User, UserRole, normalize_role
from app.services.users import UserService
from app.utils.auth import JWTError, create_access_token, decode_access_token, verify_password
from app.utils.permissions import authorize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])
bearer_scheme = HTTPBearer(auto_error=False)

NOT_AUTHENTICATED = "Não autenticado."
INVALID_TOKEN = "Token inválido ou expirado."
INVALID_LOGIN = "E-mail ou senha inválidos."


# --- Dependencies ---
async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CurrentUser:
    """Identity from the bearer token. No database round-trip."""
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_AUTHENTICATED)

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=INVALID_TOKEN,
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(credentials.credentials)
        return CurrentUser(
            id=payload["sub"],
            role=normalize_role(payload["role"]),
            email=payload.get("email"),
        )
    except (JWTError, KeyError, ValidationError):
        raise credentials_exception


def require_roles(*roles: UserRole):
    """Dependency that only lets the given roles (and admins) through."""

    async def checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        authorize(current_user, roles=roles)
        return current_user

    return checker


# --- Endpoints ---

@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Exchange e-mail and password for a bearer token."""
    user = await UserService(db).get_by_email(credentials.email)

    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_LOGIN,
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.id, "role": user.role, "email": user.email}
    )
    logger.info(f"User {user.id} logged in")
    return Token(access_token=access_token)


@router.get("/me", response_model=User)
async def read_users_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's stored user record."""
    user = await UserService(db).get(current_user.id)
    if user is None:
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    return user
