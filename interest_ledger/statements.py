"""
Statement Engine

Builds monthly account statements: the month's transactions with running
balances, followed by a single interest line prorated day by day across the
interest rule table.

The running balance starts from zero each statement and only includes the
month's own transactions. Interest is accrued on the month-end balance for
every day that has an effective rule, so intra-month balance changes do not
affect the daily amounts. Interest does not carry into later months.
"""

import calendar
from decimal import Decimal
from datetime import date
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .ledger import Ledger, Transaction, TransactionType
from .interest import InterestRuleTable
from .money import format_amount, round_money
from .logging_config import get_logger, log_action


logger = get_logger("interest_ledger.statements")


@dataclass(frozen=True)
class StatementRow:
    """One statement line. Interest lines carry a blank transaction id."""
    date: date
    transaction_id: str
    transaction_type: TransactionType
    amount: Decimal
    balance: Decimal
    
    @property
    def is_interest(self) -> bool:
        return self.transaction_type == TransactionType.INTEREST
    
    def to_display(self, places: int = 2) -> Dict[str, str]:
        """Display fields: 8-digit date, letter code, fixed-place amounts"""
        return {
            "date": f"{self.date:%Y%m%d}",
            "transaction_id": self.transaction_id,
            "type": self.transaction_type.value,
            "amount": format_amount(self.amount, places),
            "balance": format_amount(self.balance, places),
        }


@dataclass
class Statement:
    """Ordered statement rows for one account and month"""
    account_id: str
    year: int
    month: int
    rows: List[StatementRow] = field(default_factory=list)
    
    def __iter__(self) -> Iterator[StatementRow]:
        return iter(self.rows)
    
    def __len__(self) -> int:
        return len(self.rows)
    
    @property
    def transaction_rows(self) -> List[StatementRow]:
        return [row for row in self.rows if not row.is_interest]
    
    @property
    def interest_row(self) -> Optional[StatementRow]:
        for row in self.rows:
            if row.is_interest:
                return row
        return None
    
    @property
    def closing_balance(self) -> Decimal:
        return self.rows[-1].balance if self.rows else Decimal('0')


def running_balance_rows(transactions: Iterable[Transaction]) -> List[StatementRow]:
    """Rows with a running balance starting from zero, in the given order"""
    balance = Decimal('0')
    rows = []
    for txn in transactions:
        balance += txn.signed_amount
        rows.append(StatementRow(
            date=txn.date,
            transaction_id=txn.id,
            transaction_type=txn.transaction_type,
            amount=txn.amount,
            balance=balance
        ))
    return rows


class StatementGenerator:
    """
    Combines a Ledger and an InterestRuleTable into monthly statements
    """
    
    def __init__(self, ledger: Ledger, rules: InterestRuleTable,
                 day_count: int = 365):
        self.ledger = ledger
        self.rules = rules
        self.day_count = Decimal(day_count)
    
    def generate(self, account_id: str, year: int, month: int) -> Statement:
        """
        Generate the statement for one account and month
        
        Args:
            account_id: Account to report on
            year: Statement year
            month: Statement month (1-12)
            
        Returns:
            Statement with transaction rows in ledger order, then the interest row
            
        Raises:
            UnknownAccountError: If the account has no transaction history
        """
        transactions = self.ledger.transactions_in_month(account_id, year, month)
        rows = running_balance_rows(transactions)
        balance = rows[-1].balance if rows else Decimal('0')
        
        interest = self.accrue_interest(balance, year, month)
        if interest is not None:
            balance += interest
            rows.append(StatementRow(
                date=date(year, month, calendar.monthrange(year, month)[1]),
                transaction_id="",
                transaction_type=TransactionType.INTEREST,
                amount=interest,
                balance=balance
            ))
        
        log_action(logger, "info", "Statement generated",
                   account_id=account_id, action="statement",
                   resource=f"{year:04d}{month:02d}",
                   extra={"rows": len(rows), "interest": str(interest) if interest is not None else None})
        
        return Statement(account_id=account_id, year=year, month=month, rows=rows)
    
    def accrue_interest(self, balance: Decimal, year: int, month: int) -> Optional[Decimal]:
        """
        Sum daily interest on balance over the month and round once to cents
        
        Returns:
            Rounded interest, or None when no rule is effective on any day of the month
        """
        days_in_month = calendar.monthrange(year, month)[1]
        total_interest = Decimal('0')
        interest_days = 0
        
        for day in range(1, days_in_month + 1):
            rate = self.rules.rate_effective_on(date(year, month, day))
            if rate is None:
                continue
            total_interest += balance * (rate / Decimal('100')) / self.day_count
            interest_days += 1
        
        if interest_days == 0:
            return None
        
        logger.debug(f"Accrued {total_interest} over {interest_days} days on {balance}")
        return round_money(total_interest)
    
    def account_history(self, account_id: str) -> List[StatementRow]:
        """Every transaction of the account with a running balance, no interest"""
        return running_balance_rows(self.ledger.transactions(account_id))
