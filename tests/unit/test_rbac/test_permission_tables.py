# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Consistency checks for the static permission tables."""

import pytest

from src.models.enums import DataAccessLevel, Position, StaffRole
from src.rbac.permissions import (
    ALL_PERMISSION_CODES,
    CORE_PERMISSIONS,
    is_permission_valid,
    parse_permissions,
)
from src.rbac.positions import POSITION_INFO, POSITION_LEVELS, resolve_position
from src.rbac.roles import (
    DATA_TYPES,
    DEPARTMENT_NAMES,
    PAGE_PERMISSIONS,
    ROLE_DATA_ACCESS,
    ROLE_PERMISSIONS,
)


def test_catalog_codes_are_unique_and_well_formed():
    codes = [p["code"] for p in CORE_PERMISSIONS]
    assert len(codes) == len(set(codes))
    for code in codes:
        domain, _, action = code.partition(".")
        assert domain and action


def test_every_role_has_a_permission_set():
    assert set(ROLE_PERMISSIONS) == set(StaffRole)


@pytest.mark.parametrize("role", list(StaffRole))
def test_role_permissions_are_in_catalog(role):
    assert ROLE_PERMISSIONS[role] <= ALL_PERMISSION_CODES


@pytest.mark.parametrize("role", list(StaffRole))
def test_admin_is_superset_of_every_role(role):
    assert ROLE_PERMISSIONS[role] <= ROLE_PERMISSIONS[StaffRole.ADMIN]


def test_coaching_roles_share_permissions():
    assert ROLE_PERMISSIONS[StaffRole.FITNESS] == ROLE_PERMISSIONS[StaffRole.TENNIS]
    assert ROLE_PERMISSIONS[StaffRole.FITNESS] == ROLE_PERMISSIONS[StaffRole.GOLF]


def test_page_permissions_are_in_catalog():
    for path, required in PAGE_PERMISSIONS.items():
        assert path.startswith("/")
        assert set(required) <= ALL_PERMISSION_CODES, path


@pytest.mark.parametrize("role", list(StaffRole))
def test_data_access_covers_every_data_type(role):
    assert set(ROLE_DATA_ACCESS[role]) == set(DATA_TYPES)


def test_admin_sees_all_data():
    assert set(ROLE_DATA_ACCESS[StaffRole.ADMIN].values()) == {DataAccessLevel.ALL}


def test_concrete_data_levels():
    assert ROLE_DATA_ACCESS[StaffRole.RECEPTION]["sales"] is DataAccessLevel.ALL
    assert ROLE_DATA_ACCESS[StaffRole.FITNESS]["pass"] is DataAccessLevel.NONE
    assert ROLE_DATA_ACCESS[StaffRole.TENNIS]["ot"] is DataAccessLevel.ASSIGNED
    assert ROLE_DATA_ACCESS[StaffRole.GOLF]["suggestions"] is DataAccessLevel.OWN


def test_department_names_cover_roles():
    assert set(DEPARTMENT_NAMES) == set(StaffRole)


def test_every_position_has_info():
    assert set(POSITION_INFO) == set(Position)
    assert POSITION_LEVELS[Position.INTERN] == 0
    assert POSITION_LEVELS[Position.TEAM_LEAD] == 5
    assert max(POSITION_LEVELS.values()) == POSITION_LEVELS[Position.TEAM_LEAD]


def test_position_names_match_labels():
    for position, info in POSITION_INFO.items():
        assert info.name == position.value


def test_resolve_position():
    assert resolve_position("팀장") is Position.TEAM_LEAD
    assert resolve_position("team_lead") is Position.TEAM_LEAD
    assert resolve_position("manager") is Position.MANAGER
    assert resolve_position(Position.PRO) is Position.PRO
    assert resolve_position("ceo") is None
    assert resolve_position(None) is None


def test_parse_permissions_splits_valid_and_invalid():
    valid, invalid = parse_permissions(["tasks.read", "tasks.fly", "pass.read"])
    assert valid == {"tasks.read", "pass.read"}
    assert invalid == ["tasks.fly"]


def test_permission_validation_helpers():
    assert is_permission_valid("reports.approve") is True
    assert is_permission_valid("reports") is False
    module_codes = {p["code"] for p in CORE_PERMISSIONS if p["module"] == "ot"}
    assert "ot.assign" in module_codes
    assert all(code.startswith("ot.") for code in module_codes)
