# src/rbac/permissions.py
"""Catalog of every permission code the application knows about.

Codes have the form ``<domain>.<action>``. The catalog is only used for
validation and display; authorization decisions read the role tables in
:mod:`src.rbac.roles`.
"""

CORE_PERMISSIONS = [
    # Staff accounts
    {"code": "users.create", "module": "users", "description": "Create staff accounts"},
    {"code": "users.read", "module": "users", "description": "Read staff information"},
    {"code": "users.update", "module": "users", "description": "Update staff accounts"},
    {"code": "users.delete", "module": "users", "description": "Deactivate staff accounts"},
    {"code": "users.view_all", "module": "users", "description": "View every staff member"},
    {
        "code": "users.view_department",
        "module": "users",
        "description": "View staff of the own department",
    },
    {"code": "users.view_own", "module": "users", "description": "View own profile"},
    # Tasks
    {"code": "tasks.create", "module": "tasks", "description": "Create tasks"},
    {"code": "tasks.read", "module": "tasks", "description": "Read tasks"},
    {"code": "tasks.update", "module": "tasks", "description": "Update tasks"},
    {"code": "tasks.delete", "module": "tasks", "description": "Delete tasks"},
    {"code": "tasks.assign", "module": "tasks", "description": "Assign tasks to staff"},
    {"code": "tasks.view_all", "module": "tasks", "description": "View every task"},
    {
        "code": "tasks.view_department",
        "module": "tasks",
        "description": "View tasks of the own department",
    },
    {
        "code": "tasks.view_assigned",
        "module": "tasks",
        "description": "View tasks assigned to oneself",
    },
    {"code": "tasks.view_own", "module": "tasks", "description": "View own tasks"},
    {"code": "tasks.comment", "module": "tasks", "description": "Comment on tasks"},
    # Announcements
    {
        "code": "announcements.create",
        "module": "announcements",
        "description": "Create announcements",
    },
    {
        "code": "announcements.read",
        "module": "announcements",
        "description": "Read published announcements",
    },
    {
        "code": "announcements.update",
        "module": "announcements",
        "description": "Edit announcements",
    },
    {
        "code": "announcements.delete",
        "module": "announcements",
        "description": "Delete announcements",
    },
    {
        "code": "announcements.publish",
        "module": "announcements",
        "description": "Publish or withdraw announcements",
    },
    # Reports
    {"code": "reports.create", "module": "reports", "description": "Write reports"},
    {"code": "reports.read", "module": "reports", "description": "Read reports"},
    {"code": "reports.update", "module": "reports", "description": "Edit reports"},
    {"code": "reports.delete", "module": "reports", "description": "Delete reports"},
    {"code": "reports.view_all", "module": "reports", "description": "View every report"},
    {
        "code": "reports.view_department",
        "module": "reports",
        "description": "View reports of the own department",
    },
    {"code": "reports.view_own", "module": "reports", "description": "View own reports"},
    {"code": "reports.approve", "module": "reports", "description": "Approve or reject reports"},
    # Sales
    {"code": "sales.create", "module": "sales", "description": "Record sales"},
    {"code": "sales.read", "module": "sales", "description": "Read sales"},
    {"code": "sales.update", "module": "sales", "description": "Edit sales"},
    {"code": "sales.delete", "module": "sales", "description": "Delete sales"},
    {"code": "sales.view_all", "module": "sales", "description": "View every sale"},
    {
        "code": "sales.view_department",
        "module": "sales",
        "description": "View sales of the own department",
    },
    {"code": "sales.view_own", "module": "sales", "description": "View own sales"},
    # Members (customers)
    {"code": "members.create", "module": "members", "description": "Register members"},
    {"code": "members.read", "module": "members", "description": "Read member data"},
    {"code": "members.update", "module": "members", "description": "Edit member data"},
    {"code": "members.delete", "module": "members", "description": "Delete members"},
    {"code": "members.view_all", "module": "members", "description": "View every member"},
    {
        "code": "members.view_department",
        "module": "members",
        "description": "View members of the own department",
    },
    {
        "code": "members.view_assigned",
        "module": "members",
        "description": "View members assigned to oneself",
    },
    # Schedules
    {"code": "schedules.create", "module": "schedules", "description": "Create schedules"},
    {"code": "schedules.read", "module": "schedules", "description": "Read schedules"},
    {"code": "schedules.update", "module": "schedules", "description": "Edit schedules"},
    {"code": "schedules.delete", "module": "schedules", "description": "Delete schedules"},
    {
        "code": "schedules.view_all",
        "module": "schedules",
        "description": "View every schedule",
    },
    {
        "code": "schedules.view_department",
        "module": "schedules",
        "description": "View schedules of the own department",
    },
    {"code": "schedules.view_own", "module": "schedules", "description": "View own schedules"},
    # Orientation training
    {"code": "ot.create", "module": "ot", "description": "Register OT members"},
    {"code": "ot.read", "module": "ot", "description": "Read OT members"},
    {"code": "ot.update", "module": "ot", "description": "Edit OT members"},
    {"code": "ot.delete", "module": "ot", "description": "Delete OT members"},
    {"code": "ot.assign", "module": "ot", "description": "Assign OT members to staff"},
    {"code": "ot.view_all", "module": "ot", "description": "View every OT member"},
    {
        "code": "ot.view_assigned",
        "module": "ot",
        "description": "View OT members assigned to oneself",
    },
    {
        "code": "ot.progress_update",
        "module": "ot",
        "description": "Record OT contact and session progress",
    },
    # Passes
    {"code": "pass.create", "module": "pass", "description": "Issue passes"},
    {"code": "pass.read", "module": "pass", "description": "Read passes"},
    {"code": "pass.update", "module": "pass", "description": "Edit passes"},
    {"code": "pass.delete", "module": "pass", "description": "Delete passes"},
    {"code": "pass.view_all", "module": "pass", "description": "View every pass"},
    # Vending sales
    {"code": "vending.create", "module": "vending", "description": "Record vending sales"},
    {"code": "vending.read", "module": "vending", "description": "Read vending sales"},
    {"code": "vending.update", "module": "vending", "description": "Edit vending sales"},
    {"code": "vending.view_all", "module": "vending", "description": "View every vending sale"},
    {"code": "vending.view_own", "module": "vending", "description": "View own vending sales"},
    # Suggestions
    {"code": "suggestions.create", "module": "suggestions", "description": "Submit suggestions"},
    {"code": "suggestions.read", "module": "suggestions", "description": "Read suggestions"},
    {"code": "suggestions.update", "module": "suggestions", "description": "Edit suggestions"},
    {"code": "suggestions.delete", "module": "suggestions", "description": "Delete suggestions"},
    {
        "code": "suggestions.respond",
        "module": "suggestions",
        "description": "Answer or reject suggestions",
    },
    {
        "code": "suggestions.view_all",
        "module": "suggestions",
        "description": "View every suggestion",
    },
    {
        "code": "suggestions.view_own",
        "module": "suggestions",
        "description": "View own suggestions",
    },
    # Manuals
    {"code": "manuals.read", "module": "manuals", "description": "Read manuals"},
    {"code": "manuals.create", "module": "manuals", "description": "Write manuals"},
    {"code": "manuals.update", "module": "manuals", "description": "Edit manuals"},
    {"code": "manuals.delete", "module": "manuals", "description": "Delete manuals"},
    # Administration
    {"code": "admin.dashboard", "module": "admin", "description": "Open the admin dashboard"},
    {"code": "admin.settings", "module": "admin", "description": "Change system settings"},
    {"code": "admin.logs", "module": "admin", "description": "Read system logs"},
    {"code": "admin.backup", "module": "admin", "description": "Create and restore backups"},
    # Notifications
    {
        "code": "notifications.send",
        "module": "notifications",
        "description": "Send notifications to staff",
    },
    {
        "code": "notifications.manage",
        "module": "notifications",
        "description": "Manage notification settings",
    },
]

ALL_PERMISSION_CODES: frozenset[str] = frozenset(p["code"] for p in CORE_PERMISSIONS)


def is_permission_valid(code: str) -> bool:
    """Check if a permission code exists in the catalog."""
    return code in ALL_PERMISSION_CODES


def parse_permissions(codes: list[str]) -> tuple[set[str], list[str]]:
    """Split permission codes into known and unknown ones.

    Args:
        codes: Permission codes to check

    Returns:
        Tuple of (valid codes set, list of unknown codes in input order)
    """
    valid: set[str] = set()
    invalid: list[str] = []

    for code in codes:
        if is_permission_valid(code):
            valid.add(code)
        else:
            invalid.append(code)

    return valid, invalid
