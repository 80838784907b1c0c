"""Tests for RoleFlow — successor table, initiator, custom chains."""

import pytest

from taskflow.models.user import Role
from taskflow.workflows.role_flow import DEFAULT_ROLE_CHAIN, RoleFlow


# === Default Chain ===


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (Role.OWNER, Role.DIRECTOR),
        (Role.DIRECTOR, Role.MANAGER),
        (Role.MANAGER, Role.SUPERVISOR),
        (Role.SUPERVISOR, Role.EMPLOYEE),
    ],
)
def test_default_successors(role, expected):
    assert RoleFlow().successor(role) == expected


def test_employee_is_terminal():
    flow = RoleFlow()
    assert flow.successor(Role.EMPLOYEE) is None
    assert flow.is_terminal(Role.EMPLOYEE)
    assert not flow.is_terminal(Role.OWNER)


def test_default_initiator_is_owner():
    flow = RoleFlow()
    assert flow.initiator == Role.OWNER
    assert flow.roles == DEFAULT_ROLE_CHAIN


# === Custom Chains ===


def test_custom_chain_skips_roles():
    flow = RoleFlow([Role.OWNER, Role.MANAGER, Role.EMPLOYEE])
    assert flow.successor(Role.OWNER) == Role.MANAGER
    assert flow.successor(Role.MANAGER) == Role.EMPLOYEE
    assert flow.successor(Role.EMPLOYEE) is None
    assert Role.DIRECTOR not in flow


def test_role_outside_chain_raises_key_error():
    flow = RoleFlow([Role.OWNER, Role.DIRECTOR])
    with pytest.raises(KeyError):
        flow.successor(Role.SUPERVISOR)


def test_from_names_is_case_and_space_insensitive():
    flow = RoleFlow.from_names([" Owner", "DIRECTOR ", "employee"])
    assert flow.roles == (Role.OWNER, Role.DIRECTOR, Role.EMPLOYEE)


def test_from_names_ignores_blank_entries():
    # "owner,director," splits into a trailing empty string
    flow = RoleFlow.from_names("owner,director,".split(","))
    assert flow.roles == (Role.OWNER, Role.DIRECTOR)


def test_from_names_rejects_unknown_role():
    with pytest.raises(ValueError, match="Unknown role"):
        RoleFlow.from_names(["owner", "intern"])


def test_duplicate_roles_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        RoleFlow([Role.OWNER, Role.DIRECTOR, Role.OWNER])


def test_empty_chain_rejected():
    with pytest.raises(ValueError):
        RoleFlow([])


def test_single_role_chain_has_no_successor():
    flow = RoleFlow([Role.OWNER])
    assert flow.initiator == Role.OWNER
    assert flow.successor(Role.OWNER) is None
