# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control decisions over the static permission tables.

Every function here is pure: the result depends only on the subject snapshot,
the arguments and the tables in :mod:`src.rbac.roles` and
:mod:`src.rbac.positions`. Denial is expressed as ``False``,
``DataAccessLevel.NONE`` or an empty list, never as an exception. A subject of
``None`` stands for an unauthenticated caller.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple, TypeVar

from src.models.enums import DataAccessLevel, Position, StaffRole
from src.rbac.positions import POSITION_INFO, POSITION_LEVELS, resolve_position
from src.rbac.roles import (
    DEPARTMENT_NAMES,
    PAGE_PERMISSIONS,
    ROLE_DATA_ACCESS,
    ROLE_PERMISSIONS,
)

T = TypeVar("T")

SubjectId = uuid.UUID | str


@dataclass(frozen=True)
class Subject:
    """Snapshot of the authenticated staff member being evaluated."""

    role: StaffRole | None
    position: Position | None = None
    overrides: frozenset[str] = field(default_factory=frozenset)
    id: SubjectId | None = None
    department: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is StaffRole.ADMIN


class PermissionCheck(NamedTuple):
    """Decision plus an advisory explanation for the UI."""

    allowed: bool
    reason: str


def _same_id(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return False
    return str(left) == str(right)


def get_effective_permissions(subject: Subject | None) -> frozenset[str]:
    """Return the role's base permissions united with the subject's overrides."""
    if subject is None or subject.role is None:
        return frozenset()
    base = ROLE_PERMISSIONS.get(subject.role, frozenset())
    return base | frozenset(subject.overrides)


def has_permission(subject: Subject | None, permission: str) -> bool:
    """Check whether the subject holds a single permission."""
    return permission in get_effective_permissions(subject)


def has_any_permission(subject: Subject | None, permissions: Iterable[str]) -> bool:
    """True if at least one permission is held. An empty list is never satisfied."""
    effective = get_effective_permissions(subject)
    return any(p in effective for p in permissions)


def has_all_permissions(subject: Subject | None, permissions: Iterable[str]) -> bool:
    """True if every permission is held.

    An empty list is vacuously satisfied, but an unauthenticated or roleless
    subject is still denied.
    """
    if subject is None or subject.role is None:
        return False
    effective = get_effective_permissions(subject)
    return all(p in effective for p in permissions)


def has_page_access(subject: Subject | None, path: str) -> bool:
    """Check a page path against the page table.

    Paths missing from the table, or mapped to no permissions, are open to
    everyone. Rejecting unauthenticated callers is the route guard's job.
    """
    required = PAGE_PERMISSIONS.get(path)
    if not required:
        return True
    return has_any_permission(subject, required)


def get_data_access_level(subject: Subject | None, data_type: str) -> DataAccessLevel:
    """Look up how much of a data type the subject's role may see."""
    if subject is None or subject.role is None:
        return DataAccessLevel.NONE
    levels = ROLE_DATA_ACCESS.get(subject.role)
    if levels is None:
        return DataAccessLevel.NONE
    return levels.get(data_type, DataAccessLevel.NONE)


def can_modify_data(
    subject: Subject | None,
    data_type: str,
    owner_id: SubjectId | None = None,
    department: str | None = None,
    assigned_ids: Iterable[SubjectId] | None = None,
) -> bool:
    """Decide whether the subject may touch one record of ``data_type``.

    Args:
        subject: Current subject, None when unauthenticated
        data_type: Data type key such as ``"tasks"``
        owner_id: Id of the record's owner, for ``own`` scope
        department: Department of the record, for ``department`` scope.
            When omitted the department check passes.
        assigned_ids: Ids the record is assigned to, for ``assigned`` scope

    Returns:
        True if access is allowed
    """
    if subject is None:
        return False
    if subject.is_admin:
        return True

    level = get_data_access_level(subject, data_type)
    if level is DataAccessLevel.ALL:
        return True
    if level is DataAccessLevel.DEPARTMENT:
        if department is None:
            return True
        return subject.department is not None and subject.department == department
    if level is DataAccessLevel.ASSIGNED:
        return any(_same_id(subject.id, assignee) for assignee in assigned_ids or ())
    if level is DataAccessLevel.OWN:
        return _same_id(subject.id, owner_id)
    return False


def _record_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _as_id_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str | uuid.UUID):
        return [value]
    return list(value)


def filter_by_access(
    records: Sequence[T],
    subject: Subject | None,
    data_type: str,
    *,
    owner_field: str = "created_by",
    department_field: str = "department",
    assigned_field: str = "assigned_to",
) -> list[T]:
    """Keep only the records the subject may see.

    Records may be ORM objects or mappings; ownership data is read from the
    named fields. ``assigned_field`` may hold a single id or a list of ids.
    """
    if subject is None:
        return []
    if subject.is_admin:
        return list(records)

    level = get_data_access_level(subject, data_type)
    if level is DataAccessLevel.NONE:
        return []

    return [
        record
        for record in records
        if can_modify_data(
            subject,
            data_type,
            owner_id=_record_value(record, owner_field),
            department=_record_value(record, department_field),
            assigned_ids=_as_id_list(_record_value(record, assigned_field)),
        )
    ]


def has_position_permission(position: Position | None, required_level: int) -> bool:
    """Check that a position's level reaches ``required_level``."""
    if position is None:
        return False
    level = POSITION_LEVELS.get(position)
    return level is not None and level >= required_level


def has_elevated_access(subject: Subject | None, required: Position | str) -> bool:
    """Compare the subject's seniority against a reference position.

    ``required`` is a position label such as ``"팀장"`` or one of the aliases
    ``"team_lead"`` and ``"manager"``. Equal levels pass.
    """
    if subject is None or subject.position is None:
        return False
    reference = resolve_position(required)
    if reference is None:
        return False
    return has_position_permission(subject.position, POSITION_LEVELS[reference])


def can_manage_team(position: Position | None) -> bool:
    if position is None:
        return False
    info = POSITION_INFO.get(position)
    return info.can_manage_team if info else False


def has_role(subject: Subject | None, roles: StaffRole | Iterable[StaffRole]) -> bool:
    """Check the subject's role against one role or a collection of roles."""
    if subject is None or subject.role is None:
        return False
    if isinstance(roles, StaffRole):
        return subject.role is roles
    return subject.role in set(roles)


def department_name(role: StaffRole | None) -> str:
    if role is None:
        return ""
    return DEPARTMENT_NAMES.get(role, role.value)


def check_permission_with_reason(
    subject: Subject | None, permission: str
) -> PermissionCheck:
    """Same decision as :func:`has_permission`, with a display reason.

    The reason text is for display only and must not drive decisions.
    """
    if subject is None:
        return PermissionCheck(False, "Login required")
    if subject.role is None:
        return PermissionCheck(False, "No role assigned")

    if permission in ROLE_PERMISSIONS.get(subject.role, frozenset()):
        return PermissionCheck(True, f"Granted by role '{subject.role.value}'")
    if permission in subject.overrides:
        return PermissionCheck(True, "Granted by individual permission")

    reason = f"Insufficient role: '{subject.role.value}' lacks '{permission}'"
    if subject.position is not None:
        reason += f" (position: {subject.position.value})"
    return PermissionCheck(False, reason)
