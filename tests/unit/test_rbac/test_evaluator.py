# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the access control evaluator."""

import uuid

import pytest

from src.models.enums import DataAccessLevel, Position, StaffRole
from src.rbac import (
    Subject,
    can_manage_team,
    can_modify_data,
    check_permission_with_reason,
    department_name,
    filter_by_access,
    get_data_access_level,
    get_effective_permissions,
    has_all_permissions,
    has_any_permission,
    has_elevated_access,
    has_page_access,
    has_permission,
    has_position_permission,
    has_role,
)
from src.rbac.permissions import ALL_PERMISSION_CODES
from src.rbac.roles import DATA_TYPES, PAGE_PERMISSIONS, ROLE_DATA_ACCESS, ROLE_PERMISSIONS

ROLES = list(StaffRole)


def subject(role=StaffRole.FITNESS, **kwargs) -> Subject:
    return Subject(role=role, **kwargs)


class TestHasPermission:
    """Role lists, overrides and missing subjects."""

    @pytest.mark.parametrize("role", ROLES)
    def test_every_role_permission_is_granted(self, role):
        s = subject(role)
        for permission in ROLE_PERMISSIONS[role]:
            assert has_permission(s, permission) is True

    @pytest.mark.parametrize("role", ROLES)
    def test_permissions_outside_role_are_denied(self, role):
        s = subject(role, overrides=frozenset())
        for permission in ALL_PERMISSION_CODES - ROLE_PERMISSIONS[role]:
            assert has_permission(s, permission) is False

    def test_override_extends_role(self):
        assert "tasks.assign" not in ROLE_PERMISSIONS[StaffRole.FITNESS]
        s = subject(StaffRole.FITNESS, overrides=frozenset({"tasks.assign"}))
        assert has_permission(s, "tasks.assign") is True

    def test_override_does_not_leak_to_other_subjects(self):
        subject(StaffRole.FITNESS, overrides=frozenset({"tasks.assign"}))
        assert has_permission(subject(StaffRole.FITNESS), "tasks.assign") is False

    def test_no_subject_is_denied(self):
        assert has_permission(None, "announcements.read") is False

    def test_subject_without_role_is_denied(self):
        assert has_permission(Subject(role=None), "announcements.read") is False

    def test_unknown_permission_is_denied(self):
        assert has_permission(subject(StaffRole.ADMIN), "tasks.fly") is False
        assert has_permission(subject(StaffRole.ADMIN), "") is False

    def test_effective_permissions_is_union(self):
        s = subject(StaffRole.TENNIS, overrides=frozenset({"pass.read"}))
        assert get_effective_permissions(s) == ROLE_PERMISSIONS[StaffRole.TENNIS] | {"pass.read"}

    def test_effective_permissions_empty_without_subject(self):
        assert get_effective_permissions(None) == frozenset()


class TestAnyAll:
    def test_any_with_empty_list_is_false(self):
        # An empty requirement list is never satisfied by "any"
        assert has_any_permission(subject(StaffRole.ADMIN), []) is False

    def test_all_with_empty_list_is_true(self):
        # Vacuous truth: an empty requirement list is satisfied by "all"
        assert has_all_permissions(subject(StaffRole.FITNESS), []) is True

    def test_all_with_empty_list_still_needs_a_subject(self):
        assert has_all_permissions(None, []) is False

    def test_all_with_empty_list_denies_roleless_subject(self):
        roleless = Subject(role=None, overrides=frozenset({"tasks.read"}))
        assert has_all_permissions(roleless, []) is False
        assert has_all_permissions(roleless, []) == has_permission(roleless, "tasks.read")

    def test_any_matches_single_held_permission(self):
        s = subject(StaffRole.FITNESS)
        assert has_any_permission(s, ["pass.view_all", "tasks.read"]) is True
        assert has_any_permission(s, ["pass.view_all", "pass.create"]) is False

    def test_all_requires_every_permission(self):
        s = subject(StaffRole.RECEPTION)
        assert has_all_permissions(s, ["sales.create", "members.read"]) is True
        assert has_all_permissions(s, ["sales.create", "users.create"]) is False

    def test_any_accepts_generators(self):
        s = subject(StaffRole.GOLF)
        assert has_any_permission(s, (p for p in ["manuals.read"])) is True


class TestPageAccess:
    @pytest.mark.parametrize(
        "s",
        [None, Subject(role=None), Subject(role=StaffRole.FITNESS)],
        ids=["anonymous", "no-role", "fitness"],
    )
    def test_unlisted_path_is_open(self, s):
        assert "/dashboard/unlisted" not in PAGE_PERMISSIONS
        assert has_page_access(s, "/dashboard/unlisted") is True

    def test_path_with_empty_list_is_open(self):
        assert PAGE_PERMISSIONS["/dashboard"] == ()
        assert has_page_access(None, "/dashboard") is True

    def test_listed_path_needs_any_permission(self):
        assert has_page_access(subject(StaffRole.RECEPTION), "/dashboard/pass-management") is True
        assert has_page_access(subject(StaffRole.FITNESS), "/dashboard/pass-management") is False

    def test_listed_path_denies_anonymous(self):
        assert has_page_access(None, "/dashboard/admin/staff") is False

    def test_admin_opens_every_listed_page(self):
        admin = subject(StaffRole.ADMIN)
        for path in PAGE_PERMISSIONS:
            assert has_page_access(admin, path) is True

    def test_override_opens_page(self):
        s = subject(StaffRole.FITNESS, overrides=frozenset({"pass.create"}))
        assert has_page_access(s, "/dashboard/pass-management") is True


class TestDataAccessLevel:
    def test_table_lookup(self):
        assert get_data_access_level(subject(StaffRole.RECEPTION), "sales") is DataAccessLevel.ALL
        assert get_data_access_level(subject(StaffRole.FITNESS), "pass") is DataAccessLevel.NONE
        assert get_data_access_level(subject(StaffRole.GOLF), "ot") is DataAccessLevel.ASSIGNED

    def test_unknown_data_type_is_none(self):
        for role in ROLES:
            assert get_data_access_level(subject(role), "payroll") is DataAccessLevel.NONE

    def test_missing_subject_or_role_is_none(self):
        assert get_data_access_level(None, "tasks") is DataAccessLevel.NONE
        assert get_data_access_level(Subject(role=None), "tasks") is DataAccessLevel.NONE


class TestCanModifyData:
    def test_admin_always_allowed(self):
        admin = subject(StaffRole.ADMIN, id=uuid.uuid4(), department="admin")
        assert can_modify_data(admin, "pass") is True
        assert can_modify_data(admin, "no-such-type", owner_id=uuid.uuid4()) is True
        assert can_modify_data(admin, "tasks", department="golf", assigned_ids=[]) is True

    def test_all_level_allows_any_owner(self):
        s = subject(StaffRole.RECEPTION, id=uuid.uuid4())
        assert can_modify_data(s, "sales", owner_id=uuid.uuid4()) is True
        assert can_modify_data(s, "sales") is True

    def test_none_level_always_denied(self):
        s = subject(StaffRole.FITNESS, id=uuid.uuid4(), department="fitness")
        assert can_modify_data(s, "pass") is False
        assert can_modify_data(s, "pass", owner_id=s.id, department="fitness") is False

    def test_own_level(self):
        me = uuid.uuid4()
        s = subject(StaffRole.FITNESS, id=me)
        assert can_modify_data(s, "vending", owner_id=me) is True
        assert can_modify_data(s, "vending", owner_id=str(me)) is True
        assert can_modify_data(s, "vending", owner_id=uuid.uuid4()) is False
        assert can_modify_data(s, "vending", owner_id=None) is False

    def test_own_level_without_subject_id(self):
        s = subject(StaffRole.FITNESS)
        assert can_modify_data(s, "vending", owner_id=None) is False

    def test_assigned_level(self):
        me = uuid.uuid4()
        s = subject(StaffRole.TENNIS, id=me)
        assert can_modify_data(s, "ot", assigned_ids=[uuid.uuid4(), me]) is True
        assert can_modify_data(s, "ot", assigned_ids=[uuid.uuid4()]) is False
        assert can_modify_data(s, "ot", assigned_ids=[]) is False
        assert can_modify_data(s, "ot") is False

    def test_department_level(self):
        s = subject(StaffRole.FITNESS, id=uuid.uuid4(), department="fitness")
        assert can_modify_data(s, "tasks", department="fitness") is True
        assert can_modify_data(s, "tasks", department="golf") is False

    def test_department_level_without_record_department_is_allowed(self):
        # Callers must pass the record's department; omitting it is not a denial
        s = subject(StaffRole.FITNESS, id=uuid.uuid4(), department="fitness")
        assert can_modify_data(s, "tasks") is True

    def test_department_level_without_subject_department_is_denied(self):
        s = subject(StaffRole.FITNESS, id=uuid.uuid4())
        assert can_modify_data(s, "tasks", department="fitness") is False

    def test_no_subject_is_denied(self):
        assert can_modify_data(None, "manuals") is False


class TestFilterByAccess:
    def setup_method(self):
        self.me = uuid.uuid4()
        self.other = uuid.uuid4()
        self.records = [
            {"id": 1, "created_by": self.me, "department": "fitness", "assigned_to": [self.me]},
            {"id": 2, "created_by": self.other, "department": "fitness", "assigned_to": []},
            {"id": 3, "created_by": self.other, "department": "golf", "assigned_to": self.me},
        ]

    def ids(self, records):
        return [r["id"] for r in records]

    def test_admin_gets_everything(self):
        admin = subject(StaffRole.ADMIN)
        assert self.ids(filter_by_access(self.records, admin, "pass")) == [1, 2, 3]

    def test_no_subject_gets_nothing(self):
        assert filter_by_access(self.records, None, "manuals") == []

    def test_none_level_gets_nothing(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        assert filter_by_access(self.records, s, "pass") == []

    def test_own_level(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        assert self.ids(filter_by_access(self.records, s, "vending")) == [1]

    def test_department_level(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        assert self.ids(filter_by_access(self.records, s, "tasks")) == [1, 2]

    def test_assigned_level_accepts_single_id_or_list(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        assert self.ids(filter_by_access(self.records, s, "ot")) == [1, 3]

    def test_custom_field_names_and_objects(self):
        class Row:
            def __init__(self, trainer_id):
                self.trainer_id = trainer_id
                self.department = "fitness"

        rows = [Row(self.me), Row(self.other)]
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        assert filter_by_access(rows, s, "vending", owner_field="trainer_id") == [rows[0]]

    def test_input_is_not_modified(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        filter_by_access(self.records, s, "vending")
        assert len(self.records) == 3

    def test_matches_can_modify_data(self):
        s = subject(StaffRole.FITNESS, id=self.me, department="fitness")
        for data_type in DATA_TYPES:
            visible = filter_by_access(self.records, s, data_type)
            expected = [
                r
                for r in self.records
                if can_modify_data(
                    s,
                    data_type,
                    owner_id=r["created_by"],
                    department=r["department"],
                    assigned_ids=(
                        r["assigned_to"] if isinstance(r["assigned_to"], list) else [r["assigned_to"]]
                    ),
                )
            ]
            assert visible == expected


class TestPositions:
    def test_intern_is_not_team_lead(self):
        assert has_elevated_access(subject(position=Position.INTERN), "팀장") is False

    def test_equal_level_passes(self):
        assert has_elevated_access(subject(position=Position.TEAM_LEAD), "팀장") is True

    def test_aliases(self):
        assert has_elevated_access(subject(position=Position.MANAGER), "manager") is True
        assert has_elevated_access(subject(position=Position.DEPUTY_TEAM_LEAD), "team_lead") is False
        assert has_elevated_access(subject(position=Position.TEAM_LEAD), Position.MANAGER) is True

    def test_missing_position_or_unknown_reference(self):
        assert has_elevated_access(subject(), "트레이너") is False
        assert has_elevated_access(None, "인턴") is False
        assert has_elevated_access(subject(position=Position.TEAM_LEAD), "ceo") is False

    def test_position_level_threshold(self):
        assert has_position_permission(Position.SECTION_CHIEF, 3) is True
        assert has_position_permission(Position.TRAINER, 3) is False
        assert has_position_permission(Position.INTERN, 0) is True
        assert has_position_permission(None, 0) is False

    def test_can_manage_team(self):
        assert can_manage_team(Position.TEAM_LEAD) is True
        assert can_manage_team(Position.RECEPTION_MANAGER) is True
        assert can_manage_team(Position.SENIOR_TRAINER) is False
        assert can_manage_team(None) is False


class TestHelpers:
    def test_has_role(self):
        s = subject(StaffRole.TENNIS)
        assert has_role(s, StaffRole.TENNIS) is True
        assert has_role(s, [StaffRole.FITNESS, StaffRole.TENNIS]) is True
        assert has_role(s, [StaffRole.ADMIN]) is False
        assert has_role(None, StaffRole.TENNIS) is False

    def test_department_name(self):
        assert department_name(StaffRole.RECEPTION) == "리셉션"
        assert department_name(None) == ""


class TestCheckPermissionWithReason:
    def test_login_required(self):
        result = check_permission_with_reason(None, "tasks.read")
        assert result.allowed is False
        assert result.reason == "Login required"

    def test_no_role(self):
        assert check_permission_with_reason(Subject(role=None), "tasks.read").allowed is False

    def test_granted_by_role(self):
        result = check_permission_with_reason(subject(StaffRole.RECEPTION), "sales.create")
        assert result.allowed is True
        assert "reception" in result.reason

    def test_granted_by_override(self):
        s = subject(StaffRole.FITNESS, overrides=frozenset({"pass.read"}))
        result = check_permission_with_reason(s, "pass.read")
        assert result == (True, "Granted by individual permission")

    def test_insufficient_role_mentions_position(self):
        s = subject(StaffRole.FITNESS, position=Position.TRAINER)
        result = check_permission_with_reason(s, "users.create")
        assert result.allowed is False
        assert "Insufficient role" in result.reason
        assert "트레이너" in result.reason

    @pytest.mark.parametrize("role", ROLES)
    def test_decision_matches_has_permission(self, role):
        s = subject(role, overrides=frozenset({"pass.read"}))
        for permission in ALL_PERMISSION_CODES:
            assert check_permission_with_reason(s, permission).allowed == has_permission(
                s, permission
            )


class TestPurity:
    def test_repeated_calls_agree(self):
        me = uuid.uuid4()
        s = subject(StaffRole.FITNESS, position=Position.TRAINER, id=me, department="fitness")
        records = [{"created_by": me, "department": "fitness", "assigned_to": [me]}]
        calls = [
            lambda: has_permission(s, "tasks.read"),
            lambda: has_any_permission(s, ["pass.read", "tasks.read"]),
            lambda: has_all_permissions(s, ["tasks.read"]),
            lambda: has_page_access(s, "/dashboard/my-tasks"),
            lambda: get_data_access_level(s, "reports"),
            lambda: can_modify_data(s, "tasks", department="fitness"),
            lambda: filter_by_access(records, s, "vending"),
            lambda: has_elevated_access(s, "team_lead"),
            lambda: check_permission_with_reason(s, "users.create"),
        ]
        for call in calls:
            assert call() == call()

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[StaffRole.FITNESS] = frozenset()  # type: ignore[index]
        with pytest.raises(TypeError):
            ROLE_DATA_ACCESS[StaffRole.FITNESS]["pass"] = DataAccessLevel.ALL  # type: ignore[index]
        with pytest.raises(AttributeError):
            ROLE_PERMISSIONS[StaffRole.FITNESS].add("pass.read")  # type: ignore[attr-defined]
