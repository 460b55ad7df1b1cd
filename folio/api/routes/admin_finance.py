"""Admin finance tab: payments, expenses and totals."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from folio.core.dependencies import get_finance_service, get_record_store, require_admin
from folio.core.exceptions import NotFoundError
from folio.database.record_store import RecordStore
from folio.schemas import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpenseUpdateRequest,
    FinanceSummaryResponse,
    PaymentResponse,
    SuccessResponse,
)
from folio.services.finance_service import FinanceService

router = APIRouter(prefix="/admin", tags=["admin-finance"], dependencies=[Depends(require_admin)])


@router.get("/payments", response_model=list[PaymentResponse])
def list_payments(store: RecordStore = Depends(get_record_store)) -> list[PaymentResponse]:
    return [PaymentResponse.model_validate(row) for row in store.list_payments()]


@router.get("/expenses", response_model=list[ExpenseResponse])
def list_expenses(store: RecordStore = Depends(get_record_store)) -> list[ExpenseResponse]:
    return [ExpenseResponse.model_validate(row) for row in store.list_expenses()]


@router.post("/expenses", response_model=ExpenseResponse)
def create_expense(
    payload: ExpenseCreateRequest,
    store: RecordStore = Depends(get_record_store),
) -> ExpenseResponse:
    expense = store.create_expense(**payload.model_dump())
    return ExpenseResponse.model_validate(expense)


@router.patch("/expenses/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: int,
    payload: ExpenseUpdateRequest,
    store: RecordStore = Depends(get_record_store),
) -> ExpenseResponse:
    expense = store.update_expense(expense_id, payload.model_dump(exclude_unset=True))
    if expense is None:
        raise NotFoundError("Expense not found")
    return ExpenseResponse.model_validate(expense)


@router.delete("/expenses/{expense_id}", response_model=SuccessResponse)
def delete_expense(expense_id: int, store: RecordStore = Depends(get_record_store)) -> SuccessResponse:
    store.delete_expense(expense_id)
    return SuccessResponse(success=True)


@router.get("/finance/summary", response_model=FinanceSummaryResponse)
def finance_summary(finance: FinanceService = Depends(get_finance_service)) -> FinanceSummaryResponse:
    return FinanceSummaryResponse(**finance.compute_totals().as_dict())
