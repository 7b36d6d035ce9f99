"""
Transaction and account endpoints
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Depends, status

from .dependencies import get_banking_system
from .schemas import (
    AccountHistoryResponse, StatementResponse, StatementRowModel,
    TransactionRequest, TransactionResponse
)
from ..errors import LedgerError, UnknownAccountError
from ..money import format_amount
from ..parsing import statement_request_from_fields, transaction_from_fields
from ..statements import StatementRow
from ..system import BankingSystem


router = APIRouter()


def _history(system: BankingSystem, account_id: str,
             rows: Optional[List[StatementRow]] = None) -> dict:
    if rows is None:
        rows = system.account_history(account_id)
    return {
        "account_id": account_id,
        "balance": format_amount(system.balance(account_id)),
        "transactions": [StatementRowModel.from_row(row) for row in rows],
    }


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: TransactionRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Record a deposit or withdrawal"""
    try:
        parsed = transaction_from_fields(request.date, request.account_id, request.type, request.amount)
        history = system.record_transaction(*parsed)
    except UnknownAccountError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LedgerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    return {
        "transaction_id": history[-1].transaction_id,
        **_history(system, parsed.account_id, history)
    }


@router.get("/accounts/{account_id}", response_model=AccountHistoryResponse)
async def get_account(
    account_id: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Get balance and full transaction history"""
    try:
        return _history(system, account_id)
    except UnknownAccountError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/accounts/{account_id}/statements/{period}", response_model=StatementResponse)
async def get_statement(
    account_id: str,
    period: str,
    system: BankingSystem = Depends(get_banking_system)
):
    """Get the monthly statement with its interest line"""
    try:
        request = statement_request_from_fields(account_id, period)
        statement = system.statement(*request)
    except UnknownAccountError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LedgerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    interest_row = statement.interest_row
    return {
        "account_id": account_id,
        "period": period,
        "rows": [StatementRowModel.from_row(row) for row in statement],
        "interest": format_amount(interest_row.amount) if interest_row else None,
        "closing_balance": format_amount(statement.closing_balance),
    }
