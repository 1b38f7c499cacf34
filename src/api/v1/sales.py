# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales API endpoints."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Sale, Staff
from src.schemas.sale import (
    SaleCreate,
    SaleResponse,
    SalesSummary,
    SaleUpdate,
)
from src.services import auth_service, member_service, pass_service, sales_service

router = APIRouter()

SALES_VIEW_PERMISSIONS = (
    "sales.read",
    "sales.view_all",
    "sales.view_department",
    "sales.view_own",
)


def _get_visible_sale(
    db: Session, sale_id: uuid.UUID, current_staff: Staff, action: str
) -> Sale:
    sale = sales_service.get_sale(db, sale_id)
    if not sale:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sale not found",
        )
    if not sales_service.can_access(auth_service.subject_for(current_staff), sale):
        log_access_denied(current_staff, action, f"sale {sale_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sale not found",
        )
    return sale


@router.get("", response_model=list[SaleResponse])
def list_sales(
    date_from: date | None = None,
    date_to: date | None = None,
    pass_id: uuid.UUID | None = None,
    staff_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_any_permission(*SALES_VIEW_PERMISSIONS)),
) -> list[SaleResponse]:
    """List sales visible to the current staff member."""
    sales = sales_service.get_sales(
        db,
        auth_service.subject_for(current_staff),
        date_from=date_from,
        date_to=date_to,
        pass_id=pass_id,
        staff_id=staff_id,
    )
    return [SaleResponse.model_validate(s) for s in sales]


@router.get("/summary", response_model=SalesSummary)
def sales_summary(
    date_from: date | None = None,
    date_to: date | None = None,
    pass_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_any_permission(*SALES_VIEW_PERMISSIONS)),
) -> SalesSummary:
    """Revenue totals over the sales the current staff member can see."""
    sales = sales_service.get_sales(
        db,
        auth_service.subject_for(current_staff),
        date_from=date_from,
        date_to=date_to,
        pass_id=pass_id,
    )
    return sales_service.summarize_sales(sales)


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    data: SaleCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("sales.create")),
) -> SaleResponse:
    """Record a sale made by the current staff member."""
    pass_ = None
    if data.pass_id:
        pass_ = pass_service.get_pass(db, data.pass_id)
        if not pass_:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Pass not found",
            )
    member = None
    if data.member_id:
        member = member_service.get_member(db, data.member_id)
        if not member:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Member not found",
            )
    try:
        sale = sales_service.create_sale(db, data, current_staff, pass_=pass_, member=member)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return SaleResponse.model_validate(sale)


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("sales.read")),
) -> SaleResponse:
    """Get a sale."""
    return SaleResponse.model_validate(
        _get_visible_sale(db, sale_id, current_staff, "sales.read")
    )


@router.put("/{sale_id}", response_model=SaleResponse)
def update_sale(
    sale_id: uuid.UUID,
    data: SaleUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("sales.update")),
) -> SaleResponse:
    """Correct a sale."""
    sale = _get_visible_sale(db, sale_id, current_staff, "sales.update")
    sale = sales_service.update_sale(db, sale, data)
    return SaleResponse.model_validate(sale)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("sales.delete")),
) -> None:
    """Delete a sale."""
    sale = _get_visible_sale(db, sale_id, current_staff, "sales.delete")
    sales_service.delete_sale(db, sale, actor_id=current_staff.id)
