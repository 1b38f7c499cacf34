"""Pydantic schemas package."""
from src.schemas.access import (
    AccessProfile,
    DataAccessResponse,
    PageAccessResponse,
    PermissionCheckResponse,
    PermissionSchema,
)
from src.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementPublish,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from src.schemas.common import HealthResponse, MessageResponse
from src.schemas.member import (
    ConsultingRecordCreate,
    ConsultingRecordResponse,
    MemberCreate,
    MemberResponse,
    MemberUpdate,
)
from src.schemas.ot import (
    OTAssign,
    OTContact,
    OTMemberCreate,
    OTMemberResponse,
    OTMemberUpdate,
    OTSessionCreate,
    OTSessionResponse,
    OTSessionUpdate,
)
from src.schemas.report import (
    ReportCreate,
    ReportResponse,
    ReportReview,
    ReportStats,
    ReportUpdate,
)
from src.schemas.sale import (
    PassCreate,
    PassResponse,
    PassSalesTotal,
    PassUpdate,
    SaleCreate,
    SaleResponse,
    SalesSummary,
    SaleUpdate,
)
from src.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from src.schemas.staff import (
    StaffAccessUpdate,
    StaffCreate,
    StaffResponse,
    StaffUpdate,
)
from src.schemas.suggestion import (
    SuggestionCreate,
    SuggestionRespond,
    SuggestionResponse,
)
from src.schemas.task import (
    TaskAssign,
    TaskCommentCreate,
    TaskCommentResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    "AccessProfile",
    "AnnouncementCreate",
    "AnnouncementPublish",
    "AnnouncementResponse",
    "AnnouncementUpdate",
    "ConsultingRecordCreate",
    "ConsultingRecordResponse",
    "DataAccessResponse",
    "HealthResponse",
    "MemberCreate",
    "MemberResponse",
    "MemberUpdate",
    "MessageResponse",
    "OTAssign",
    "OTContact",
    "OTMemberCreate",
    "OTMemberResponse",
    "OTMemberUpdate",
    "OTSessionCreate",
    "OTSessionResponse",
    "OTSessionUpdate",
    "PageAccessResponse",
    "PassCreate",
    "PassResponse",
    "PassSalesTotal",
    "PassUpdate",
    "PermissionCheckResponse",
    "PermissionSchema",
    "ReportCreate",
    "ReportResponse",
    "ReportReview",
    "ReportStats",
    "ReportUpdate",
    "SaleCreate",
    "SaleResponse",
    "SaleUpdate",
    "SalesSummary",
    "ScheduleCreate",
    "ScheduleResponse",
    "ScheduleUpdate",
    "StaffAccessUpdate",
    "StaffCreate",
    "StaffResponse",
    "StaffUpdate",
    "SuggestionCreate",
    "SuggestionRespond",
    "SuggestionResponse",
    "TaskAssign",
    "TaskCommentCreate",
    "TaskCommentResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
]
