"""
Pydantic schemas for the wedding budget.

The budget is split into categories, each with a planned
``budgetAmount`` and a running ``spentAmount``.  Expenses belong to a
category through ``categoryId``; recording an expense raises the
category's spent amount.  The reference is not enforced: an expense
may point at a category that does not exist.
"""

from datetime import date as date_type
from typing import Optional

from pydantic import Field

from .common import COLOR_PALETTE, CamelModel, DecimalString, PartialUpdate


class BudgetCategoryCreate(CamelModel):
    """Schema for creating a budget category."""

    name: str = Field(..., min_length=1, examples=["Venue"])
    budget_amount: DecimalString = Field(..., examples=["8000"])
    spent_amount: DecimalString = "0"
    color: str = COLOR_PALETTE[0]


class BudgetCategoryUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "budget_amount", "spent_amount", "color"})

    name: Optional[str] = Field(None, min_length=1)
    budget_amount: Optional[DecimalString] = None
    spent_amount: Optional[DecimalString] = None
    color: Optional[str] = None


class BudgetCategoryRead(BudgetCategoryCreate):
    id: int


class BudgetExpenseCreate(CamelModel):
    """Schema for recording an expense against a category."""

    category_id: int
    name: str = Field(..., min_length=1, examples=["Deposit"])
    amount: DecimalString = Field(..., examples=["50.50"])
    date: date_type
    vendor: Optional[str] = None
    notes: Optional[str] = None


class BudgetExpenseUpdate(PartialUpdate):
    non_nullable = frozenset({"category_id", "name", "amount", "date"})

    category_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    amount: Optional[DecimalString] = None
    date: Optional[date_type] = None
    vendor: Optional[str] = None
    notes: Optional[str] = None


class BudgetExpenseRead(BudgetExpenseCreate):
    id: int
