# src/rbac/roles.py
from types import MappingProxyType

from src.models.enums import DataAccessLevel, StaffRole

from .permissions import CORE_PERMISSIONS

# Admin always gets every catalog permission
ADMIN_PERMISSIONS = frozenset(p["code"] for p in CORE_PERMISSIONS)

# Reception: members, schedules, sales and OT assignment
RECEPTION_PERMISSIONS = frozenset(
    [
        "users.view_own",
        "tasks.create",
        "tasks.read",
        "tasks.update",
        "tasks.view_department",
        "tasks.view_assigned",
        "tasks.comment",
        "announcements.read",
        "reports.create",
        "reports.read",
        "reports.view_department",
        "reports.view_own",
        "sales.create",
        "sales.read",
        "sales.update",
        "sales.view_all",
        "members.create",
        "members.read",
        "members.update",
        "members.view_all",
        "schedules.create",
        "schedules.read",
        "schedules.update",
        "schedules.view_all",
        "ot.create",
        "ot.read",
        "ot.update",
        "ot.assign",
        "ot.view_all",
        "ot.view_assigned",
        "ot.progress_update",
        "pass.create",
        "pass.read",
        "pass.update",
        "pass.view_all",
        "vending.create",
        "vending.read",
        "vending.update",
        "vending.view_all",
        "vending.view_own",
        "suggestions.create",
        "suggestions.read",
        "suggestions.view_own",
        "manuals.read",
    ]
)

# Fitness, tennis and golf share one list: lessons, own members, OT progress
COACHING_PERMISSIONS = frozenset(
    [
        "users.view_own",
        "tasks.create",
        "tasks.read",
        "tasks.update",
        "tasks.view_department",
        "tasks.view_assigned",
        "tasks.comment",
        "announcements.read",
        "reports.create",
        "reports.read",
        "reports.view_department",
        "reports.view_own",
        "sales.create",
        "sales.read",
        "sales.view_department",
        "sales.view_own",
        "members.read",
        "members.update",
        "members.view_department",
        "members.view_assigned",
        "schedules.create",
        "schedules.read",
        "schedules.update",
        "schedules.view_department",
        "schedules.view_own",
        "ot.read",
        "ot.view_assigned",
        "ot.progress_update",
        "vending.create",
        "vending.read",
        "vending.view_own",
        "suggestions.create",
        "suggestions.read",
        "suggestions.view_own",
        "manuals.read",
    ]
)

ROLE_PERMISSIONS: MappingProxyType[StaffRole, frozenset[str]] = MappingProxyType(
    {
        StaffRole.ADMIN: ADMIN_PERMISSIONS,
        StaffRole.RECEPTION: RECEPTION_PERMISSIONS,
        StaffRole.FITNESS: COACHING_PERMISSIONS,
        StaffRole.TENNIS: COACHING_PERMISSIONS,
        StaffRole.GOLF: COACHING_PERMISSIONS,
    }
)

# Any one of the listed permissions opens the page; unlisted pages are open
PAGE_PERMISSIONS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "/dashboard": (),
        "/dashboard/my-tasks": ("tasks.view_assigned", "tasks.view_own"),
        "/dashboard/all-tasks": ("tasks.view_all", "tasks.view_department"),
        "/dashboard/admin/tasks": ("tasks.view_all", "tasks.assign"),
        "/dashboard/admin/staff": ("users.view_all", "users.create", "users.update"),
        "/dashboard/admin/announcements": (
            "announcements.create",
            "announcements.update",
            "announcements.delete",
        ),
        "/dashboard/admin/suggestions": ("admin.dashboard", "suggestions.view_all"),
        "/dashboard/sales-report": ("sales.view_all", "sales.view_department"),
        "/dashboard/sales-report-user": ("sales.view_own",),
        "/dashboard/sales-entry": ("sales.create",),
        "/dashboard/sales-report-create": (
            "reports.create",
            "sales.view_department",
            "sales.view_own",
        ),
        "/dashboard/members": ("members.view_all", "members.view_department"),
        "/dashboard/daily-report": ("reports.create", "reports.view_own"),
        "/dashboard/customer/list": ("members.view_all",),
        "/dashboard/schedules": (
            "schedules.view_all",
            "schedules.view_department",
            "schedules.view_own",
        ),
        "/dashboard/ot-assignment": ("ot.view_all", "ot.view_assigned", "ot.assign"),
        "/dashboard/pass-management": ("pass.view_all", "pass.create"),
        "/dashboard/vending-sales": ("vending.create", "vending.view_all", "vending.view_own"),
        "/dashboard/announcements": ("announcements.read",),
        "/dashboard/manuals": ("manuals.read",),
        "/dashboard/suggestions": (
            "suggestions.create",
            "suggestions.read",
            "suggestions.view_own",
        ),
    }
)

DATA_TYPES = (
    "users",
    "tasks",
    "reports",
    "sales",
    "members",
    "announcements",
    "schedules",
    "ot",
    "pass",
    "vending",
    "suggestions",
    "manuals",
)

_ALL = DataAccessLevel.ALL
_DEPARTMENT = DataAccessLevel.DEPARTMENT
_ASSIGNED = DataAccessLevel.ASSIGNED
_OWN = DataAccessLevel.OWN
_NONE = DataAccessLevel.NONE

_COACHING_DATA_ACCESS = MappingProxyType(
    {
        "users": _OWN,
        "tasks": _DEPARTMENT,
        "reports": _DEPARTMENT,
        "sales": _DEPARTMENT,
        "members": _DEPARTMENT,
        "announcements": _ALL,
        "schedules": _DEPARTMENT,
        "ot": _ASSIGNED,
        "pass": _NONE,
        "vending": _OWN,
        "suggestions": _OWN,
        "manuals": _ALL,
    }
)

ROLE_DATA_ACCESS: MappingProxyType[
    StaffRole, MappingProxyType[str, DataAccessLevel]
] = MappingProxyType(
    {
        StaffRole.ADMIN: MappingProxyType({data_type: _ALL for data_type in DATA_TYPES}),
        StaffRole.RECEPTION: MappingProxyType(
            {
                "users": _OWN,
                "tasks": _DEPARTMENT,
                "reports": _DEPARTMENT,
                "sales": _ALL,
                "members": _ALL,
                "announcements": _ALL,
                "schedules": _ALL,
                "ot": _ALL,
                "pass": _ALL,
                "vending": _ALL,
                "suggestions": _OWN,
                "manuals": _ALL,
            }
        ),
        StaffRole.FITNESS: _COACHING_DATA_ACCESS,
        StaffRole.TENNIS: _COACHING_DATA_ACCESS,
        StaffRole.GOLF: _COACHING_DATA_ACCESS,
    }
)

# Display names used by the dashboard
DEPARTMENT_NAMES: MappingProxyType[StaffRole, str] = MappingProxyType(
    {
        StaffRole.ADMIN: "관리자",
        StaffRole.RECEPTION: "리셉션",
        StaffRole.FITNESS: "피트니스",
        StaffRole.TENNIS: "테니스",
        StaffRole.GOLF: "골프",
    }
)
