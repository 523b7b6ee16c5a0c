"""Tests for the authorization policy."""

import pytest
from fastapi import HTTPException

from app.models.user import CurrentUser, UserRole
from app.utils.permissions import authorize, is_allowed, scope_to_caller

ALICE = "11111111-1111-4111-8111-111111111111"
BOB = "22222222-2222-4222-8222-222222222222"


class TestIsAllowed:
    """Tests for the pure policy function."""

    def test_admin_always_allowed(self):
        assert is_allowed(UserRole.ADMIN, ALICE, owner_id=BOB, roles=[UserRole.TEACHER])

    def test_role_not_in_whitelist_denied(self):
        assert not is_allowed(UserRole.STUDENT, ALICE, roles=[UserRole.TEACHER])

    def test_role_in_whitelist_allowed(self):
        assert is_allowed(UserRole.TEACHER, ALICE, roles=[UserRole.TEACHER])

    def test_owner_allowed(self):
        assert is_allowed(UserRole.STUDENT, ALICE, owner_id=ALICE)

    def test_non_owner_denied(self):
        assert not is_allowed(UserRole.STUDENT, ALICE, owner_id=BOB)

    def test_role_and_owner_both_required(self):
        assert not is_allowed(UserRole.STUDENT, ALICE, owner_id=ALICE, roles=[UserRole.TEACHER])

    def test_no_constraints_allowed(self):
        assert is_allowed("STUDENT", ALICE)


class TestAuthorize:
    def test_raises_403_with_message(self):
        caller = CurrentUser(id=ALICE, role=UserRole.STUDENT)
        with pytest.raises(HTTPException) as exc_info:
            authorize(caller, owner_id=BOB, message="Nope")
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Nope"


class TestScopeToCaller:
    """Tests for list filters naming a user."""

    def test_admin_keeps_requested_filter(self):
        caller = CurrentUser(id=ALICE, role=UserRole.ADMIN)
        assert scope_to_caller(caller, BOB) == BOB
        assert scope_to_caller(caller, None) is None

    def test_non_admin_defaults_to_self(self):
        caller = CurrentUser(id=ALICE, role=UserRole.STUDENT)
        assert scope_to_caller(caller, None) == ALICE

    def test_non_admin_naming_self(self):
        caller = CurrentUser(id=ALICE, role=UserRole.TEACHER)
        assert scope_to_caller(caller, ALICE) == ALICE

    def test_non_admin_naming_other_denied(self):
        caller = CurrentUser(id=ALICE, role=UserRole.STUDENT)
        with pytest.raises(HTTPException) as exc_info:
            scope_to_caller(caller, BOB)
        assert exc_info.value.status_code == 403

    def test_required_filter_missing_denied(self):
        caller = CurrentUser(id=ALICE, role=UserRole.STUDENT)
        with pytest.raises(HTTPException):
            scope_to_caller(caller, None, required=True)
