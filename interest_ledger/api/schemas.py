"""
Pydantic schemas for API requests and responses
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..interest import InterestRule
from ..formatting import rule_display
from ..statements import StatementRow


class TransactionRequest(BaseModel):
    date: str = Field(..., description="Transaction date (yyyymmdd)")
    account_id: str
    type: str = Field(..., description="D for deposit, W for withdrawal")
    amount: str = Field(..., description="Decimal amount as string")


class InterestRuleRequest(BaseModel):
    date: str = Field(..., description="Effective date (yyyymmdd)")
    rule_id: str
    rate: str = Field(..., description="Annual rate in percent, between 0 and 100")


class StatementRowModel(BaseModel):
    date: str
    transaction_id: str
    type: str
    amount: str
    balance: str
    
    @classmethod
    def from_row(cls, row: StatementRow) -> 'StatementRowModel':
        return cls(**row.to_display())


class InterestRuleModel(BaseModel):
    date: str
    rule_id: str
    rate: str
    
    @classmethod
    def from_rule(cls, rule: InterestRule) -> 'InterestRuleModel':
        return cls(**rule_display(rule))


class AccountHistoryResponse(BaseModel):
    account_id: str
    balance: str
    transactions: List[StatementRowModel]


class TransactionResponse(AccountHistoryResponse):
    transaction_id: str


class StatementResponse(BaseModel):
    account_id: str
    period: str = Field(..., description="Statement month (yyyymm)")
    rows: List[StatementRowModel]
    interest: Optional[str] = None
    closing_balance: str
