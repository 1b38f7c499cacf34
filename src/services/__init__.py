"""Services package."""
from src.services import (
    announcement_service,
    auth_service,
    member_service,
    ot_service,
    pass_service,
    report_service,
    sales_service,
    schedule_service,
    staff_service,
    suggestion_service,
    task_service,
)

__all__ = [
    "announcement_service",
    "auth_service",
    "member_service",
    "ot_service",
    "pass_service",
    "report_service",
    "sales_service",
    "schedule_service",
    "staff_service",
    "suggestion_service",
    "task_service",
]
