"""
Transaction Ledger

Holds each account's transactions in insertion order. Transactions are
immutable once recorded and balances are always derived from them, never
stored separately.
"""

from decimal import Decimal
from datetime import date
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional
from enum import Enum

from .errors import InsufficientFundsError, InvalidInputError, UnknownAccountError
from .logging_config import get_logger, log_action


logger = get_logger("interest_ledger.ledger")


class TransactionType(Enum):
    """Statement row kinds, valued by their single-letter display code"""
    DEPOSIT = "D"
    WITHDRAWAL = "W"
    INTEREST = "I"  # Synthetic, only ever produced by statements
    
    @classmethod
    def from_code(cls, code: str) -> 'TransactionType':
        """Look up a recordable type by its letter, case-insensitive"""
        try:
            kind = cls(code.strip().upper())
        except ValueError:
            raise InvalidInputError(f"Unknown transaction type '{code}'")
        if kind == cls.INTEREST:
            raise InvalidInputError("Interest cannot be recorded as a transaction")
        return kind


@dataclass(frozen=True)
class Transaction:
    """
    Immutable ledger entry. The amount is always positive; the sign comes
    from the transaction type.
    """
    id: str
    date: date
    account_id: str
    transaction_type: TransactionType
    amount: Decimal
    
    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise InvalidInputError("Transaction amount must be a Decimal")
        if self.amount <= Decimal('0'):
            raise InvalidInputError("Transaction amount must be positive")
    
    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affects the balance"""
        if self.transaction_type == TransactionType.WITHDRAWAL:
            return -self.amount
        return self.amount


@dataclass
class Account:
    """Account identified by id, with its transactions in insertion order"""
    id: str
    transactions: List[Transaction] = field(default_factory=list)
    
    @property
    def balance(self) -> Decimal:
        """Deposits minus withdrawals over every held transaction"""
        return sum((txn.signed_amount for txn in self.transactions), Decimal('0'))
    
    def next_transaction_id(self, txn_date: date) -> str:
        """Id for the next transaction: <yyyymmdd>-<sequence>"""
        return f"{txn_date:%Y%m%d}-{len(self.transactions) + 1:02d}"


class MonthlyTransactions:
    """
    Restartable view over an account's transactions dated in one calendar
    month. Each iteration walks the account in insertion order.
    """
    
    def __init__(self, transactions: List[Transaction], year: int, month: int):
        self._transactions = transactions
        self.year = year
        self.month = month
    
    def __iter__(self) -> Iterator[Transaction]:
        return (
            txn for txn in self._transactions
            if txn.date.year == self.year and txn.date.month == self.month
        )


class Ledger:
    """
    Owns all accounts. Accounts are created on their first deposit.
    """
    
    def __init__(self):
        self._accounts: Dict[str, Account] = {}
    
    def add_transaction(
        self,
        account_id: str,
        txn_date: date,
        transaction_type: TransactionType,
        amount: Decimal
    ) -> Transaction:
        """
        Record a deposit or withdrawal
        
        Args:
            account_id: Account to post to
            txn_date: Calendar date of the transaction
            transaction_type: DEPOSIT or WITHDRAWAL
            amount: Positive amount
            
        Returns:
            The recorded transaction
            
        Raises:
            UnknownAccountError: Withdrawal from an account with no history
            InsufficientFundsError: Withdrawal exceeds the current balance
        """
        if transaction_type == TransactionType.INTEREST:
            raise InvalidInputError("Interest cannot be recorded as a transaction")
        
        account = self._accounts.get(account_id)
        
        if transaction_type == TransactionType.WITHDRAWAL:
            if account is None:
                log_action(logger, "warning", "Withdrawal rejected for unknown account",
                           account_id=account_id, action="withdraw")
                raise UnknownAccountError(account_id)
            
            balance = account.balance
            if balance < amount:
                log_action(logger, "warning", "Withdrawal rejected for insufficient funds",
                           account_id=account_id, action="withdraw",
                           extra={"balance": str(balance), "amount": str(amount)})
                raise InsufficientFundsError(account_id, balance, amount)
        
        # Build before creating the account so a bad amount leaves no trace
        new_account = account is None
        if new_account:
            account = Account(id=account_id)
        
        transaction = Transaction(
            id=account.next_transaction_id(txn_date),
            date=txn_date,
            account_id=account_id,
            transaction_type=transaction_type,
            amount=amount
        )
        
        if new_account:
            self._accounts[account_id] = account
        account.transactions.append(transaction)
        
        log_action(logger, "info", "Transaction recorded",
                   account_id=account_id, action=transaction_type.name.lower(),
                   resource=transaction.id, extra={"amount": str(amount)})
        
        return transaction
    
    def has_account(self, account_id: str) -> bool:
        return account_id in self._accounts
    
    def get_account(self, account_id: str) -> Account:
        """
        Raises:
            UnknownAccountError: If the account has never transacted
        """
        account = self._accounts.get(account_id)
        if account is None:
            raise UnknownAccountError(account_id)
        return account
    
    def find_account(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)
    
    def account_ids(self) -> List[str]:
        return list(self._accounts)
    
    def transactions(self, account_id: str) -> List[Transaction]:
        """All transactions for an account in insertion order"""
        return list(self.get_account(account_id).transactions)
    
    def balance_as_of(self, account_id: str) -> Decimal:
        """Signed sum of every transaction held for the account"""
        return self.get_account(account_id).balance
    
    def transactions_in_month(self, account_id: str, year: int, month: int) -> MonthlyTransactions:
        """Transactions dated in the given month, insertion order preserved"""
        return MonthlyTransactions(self.get_account(account_id).transactions, year, month)
