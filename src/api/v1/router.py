# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import (
    access,
    announcements,
    auth,
    members,
    ot,
    passes,
    reports,
    sales,
    schedules,
    staff,
    suggestions,
    tasks,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Access control routes
api_router.include_router(access.router, tags=["access"])

# Staff routes
api_router.include_router(staff.router, prefix="/staff", tags=["staff"])

# Task routes
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])

# Announcement routes
api_router.include_router(
    announcements.router, prefix="/announcements", tags=["announcements"]
)

# Suggestion routes
api_router.include_router(
    suggestions.router, prefix="/suggestions", tags=["suggestions"]
)

# Schedule routes
api_router.include_router(schedules.router, prefix="/schedules", tags=["schedules"])

# Report routes
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])

# Orientation-training routes
api_router.include_router(ot.router, prefix="/ot-members", tags=["ot"])

# Member routes
api_router.include_router(members.router, prefix="/members", tags=["members"])

# Sales and pass routes
api_router.include_router(sales.router, prefix="/sales", tags=["sales"])
api_router.include_router(passes.router, prefix="/passes", tags=["passes"])
