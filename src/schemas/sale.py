# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pass and sale schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.enums import PaymentMethod


class PassCreate(BaseModel):
    """Schema for adding a pass to the price list."""

    name: str = Field(..., min_length=1, max_length=100)
    amount: int = Field(..., ge=0)
    description: Optional[str] = None


class PassUpdate(BaseModel):
    """Schema for updating a pass."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None


class PassResponse(BaseModel):
    """Schema for pass response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    amount: int
    description: Optional[str]
    department: str
    created_by_id: Optional[uuid.UUID]
    created_at: datetime.datetime
    updated_at: datetime.datetime


class SaleCreate(BaseModel):
    """Schema for recording a sale.

    ``amount`` defaults to the pass price and ``customer_name`` to the
    member's name when those are given.
    """

    customer_name: Optional[str] = Field(None, min_length=1, max_length=100)
    member_id: Optional[uuid.UUID] = None
    pass_id: Optional[uuid.UUID] = None
    amount: Optional[int] = Field(None, ge=0)
    sale_date: Optional[datetime.datetime] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def validate_references(self) -> "SaleCreate":
        if self.amount is None and self.pass_id is None:
            raise ValueError("amount is required when no pass is sold")
        if self.customer_name is None and self.member_id is None:
            raise ValueError("customer_name is required when no member is given")
        return self


class SaleUpdate(BaseModel):
    """Schema for correcting a sale."""

    customer_name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[int] = Field(None, ge=0)
    sale_date: Optional[datetime.datetime] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class SaleResponse(BaseModel):
    """Schema for sale response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    customer_name: str
    member_id: Optional[uuid.UUID]
    pass_id: Optional[uuid.UUID]
    pass_name: Optional[str]
    amount: int
    sale_date: datetime.datetime
    payment_method: Optional[PaymentMethod]
    notes: Optional[str]
    staff_id: Optional[uuid.UUID]
    department: str
    created_at: datetime.datetime
    updated_at: datetime.datetime


class PassSalesTotal(BaseModel):
    """Revenue of one pass inside a sales summary."""

    pass_id: Optional[uuid.UUID]
    pass_name: Optional[str]
    count: int
    total: int


class SalesSummary(BaseModel):
    """Totals over the sales visible to the caller."""

    count: int
    total: int
    by_pass: list[PassSalesTotal]
    by_department: dict[str, int]
