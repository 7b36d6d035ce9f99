"""
Ledger Errors

Business-rule failures raised by the ledger, the interest rule table and the
input parser. All of them are recoverable: callers catch LedgerError and
re-prompt (console) or answer with a 4xx (API).
"""


class LedgerError(ValueError):
    """Base class for all recoverable ledger errors"""
    pass


class UnknownAccountError(LedgerError):
    """Account has no transaction history"""

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class InsufficientFundsError(LedgerError):
    """Withdrawal exceeds the current balance"""

    def __init__(self, account_id: str, balance, amount):
        super().__init__(
            f"Insufficient funds in {account_id}: balance {balance}, requested {amount}"
        )
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class InvalidRuleError(LedgerError):
    """Interest rate outside the open interval (0, 100)"""
    pass


class InvalidInputError(LedgerError):
    """Raw input line could not be parsed"""
    pass
