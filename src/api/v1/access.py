# src/api/v1/access.py
from fastapi import APIRouter, Depends, Query

from src.api.deps import (
    get_current_staff,
    get_optional_staff,
    log_access_denied,
    require_permission,
)
from src.config import settings
from src.models import Staff
from src.rbac import (
    can_manage_team,
    check_permission_with_reason,
    department_name,
    get_data_access_level,
    get_effective_permissions,
    has_page_access,
)
from src.rbac.permissions import CORE_PERMISSIONS
from src.rbac.positions import POSITION_LEVELS
from src.rbac.roles import DATA_TYPES
from src.schemas.access import (
    AccessProfile,
    DataAccessResponse,
    PageAccessResponse,
    PermissionCheckResponse,
    PermissionSchema,
)
from src.services import auth_service

router = APIRouter()

@router.get("/access/me", response_model=AccessProfile, summary="Get current staff member's access profile")
def get_my_access(
    current_staff: Staff = Depends(get_current_staff),
):
    """Return the effective permissions and data scopes the dashboard renders from."""
    subject = auth_service.subject_for(current_staff)
    return AccessProfile(
        staff_id=current_staff.id,
        role=current_staff.role,
        position=current_staff.position,
        position_level=POSITION_LEVELS.get(current_staff.position) if current_staff.position else None,
        department=current_staff.department,
        department_name=department_name(current_staff.role),
        can_manage_team=can_manage_team(current_staff.position),
        permissions=sorted(get_effective_permissions(subject)),
        data_access={data_type: get_data_access_level(subject, data_type) for data_type in DATA_TYPES},
    )

@router.get("/access/page", response_model=PageAccessResponse, summary="Route guard decision for a page")
def check_page_access(
    path: str = Query(..., min_length=1),
    current_staff: Staff | None = Depends(get_optional_staff),
):
    """Decide whether the caller may open a dashboard page.

    Unauthenticated callers are sent to the login page, authenticated callers
    without access to the landing page.
    """
    if current_staff is None:
        log_access_denied(None, "page", path)
        return PageAccessResponse(
            path=path, allowed=False, redirect_to=settings.login_path, reason="Login required"
        )

    if has_page_access(auth_service.subject_for(current_staff), path):
        return PageAccessResponse(path=path, allowed=True)

    log_access_denied(current_staff, "page", path)
    return PageAccessResponse(
        path=path,
        allowed=False,
        redirect_to=settings.default_landing_path,
        reason="Insufficient permissions",
    )

@router.get("/access/check", response_model=PermissionCheckResponse, summary="Check a single permission with reason")
def check_permission(
    permission: str = Query(..., min_length=1),
    current_staff: Staff = Depends(get_current_staff),
):
    result = check_permission_with_reason(auth_service.subject_for(current_staff), permission)
    return PermissionCheckResponse(permission=permission, allowed=result.allowed, reason=result.reason)

@router.get("/access/data/{data_type}", response_model=DataAccessResponse, summary="Get data access level for a data type")
def get_data_access(
    data_type: str,
    current_staff: Staff = Depends(get_current_staff),
):
    """Unknown data types report ``none``."""
    level = get_data_access_level(auth_service.subject_for(current_staff), data_type)
    return DataAccessResponse(data_type=data_type, level=level)

@router.get("/access/catalog", response_model=list[PermissionSchema], summary="List all known permissions")
def list_permission_catalog(
    current_staff: Staff = Depends(require_permission("admin.settings")),
):
    """Requires admin.settings permission."""
    return [PermissionSchema(**p) for p in CORE_PERMISSIONS]
