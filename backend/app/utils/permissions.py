"""Authorization policy shared by every resource router.

All role and ownership decisions go through :func:`is_allowed`:

* ADMIN callers are always allowed.
* When ``roles`` is given, the caller's role must be one of them.
* When ``owner_id`` is given, the caller must be that user.

Routers call :func:`authorize` (raises 403) or :func:`scope_to_caller` for
list filters that name a user.
"""

from collections.abc import Iterable

from fastapi import HTTPException, status

from app.models.user import CurrentUser, UserRole

FORBIDDEN_MESSAGE = "Não autorizado."


def is_allowed(
    caller_role: UserRole | str,
    caller_id: str,
    owner_id: str | None = None,
    roles: Iterable[UserRole | str] | None = None,
) -> bool:
    role = UserRole(caller_role)
    if role is UserRole.ADMIN:
        return True
    if roles is not None and role not in {UserRole(r) for r in roles}:
        return False
    if owner_id is not None:
        return str(caller_id) == str(owner_id)
    return True


def authorize(
    caller: CurrentUser,
    owner_id: str | None = None,
    roles: Iterable[UserRole | str] | None = None,
    message: str = FORBIDDEN_MESSAGE,
) -> None:
    """Raise 403 unless the policy allows ``caller``."""
    if not is_allowed(caller.role, caller.id, owner_id=owner_id, roles=roles):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=message)


def scope_to_caller(
    caller: CurrentUser,
    requested_user_id: str | None,
    required: bool = False,
) -> str | None:
    """Resolve the user filter of a list query.

    Admins may filter by any user (or none). Everyone else is limited to
    their own records; naming another user is refused before any query runs.
    With ``required`` a non-admin must name themselves explicitly.
    """
    if caller.is_admin:
        return requested_user_id
    if requested_user_id is None:
        if required:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)
        return caller.id
    if str(requested_user_id) != caller.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)
    return caller.id
