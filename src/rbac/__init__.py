# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role, position and data-scope based access control.

The tables are compiled in; the evaluator functions are pure and can be
called from any thread without coordination.
"""

from src.rbac.evaluator import (
    PermissionCheck,
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

__all__ = [  # noqa: RUF022
    # Subject
    "Subject",
    "PermissionCheck",
    # Permissions
    "get_effective_permissions",
    "has_permission",
    "has_any_permission",
    "has_all_permissions",
    "check_permission_with_reason",
    "has_role",
    # Pages
    "has_page_access",
    # Data scopes
    "get_data_access_level",
    "can_modify_data",
    "filter_by_access",
    # Positions
    "has_elevated_access",
    "has_position_permission",
    "can_manage_team",
    "department_name",
]
