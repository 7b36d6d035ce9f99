"""
Banking System Context

One BankingSystem per session: it owns the ledger, the interest rule table
and the statement generator that reads them. Nothing is shared between
instances.
"""

from decimal import Decimal
from datetime import date
from typing import List, Optional

from .config import LedgerConfig, get_config
from .interest import InterestRule, InterestRuleTable
from .ledger import Ledger, TransactionType
from .statements import Statement, StatementGenerator, StatementRow


class BankingSystem:
    """Ledger, interest rules and statements for a single session"""
    
    def __init__(self, config: Optional[LedgerConfig] = None):
        self.config = config or get_config()
        self.ledger = Ledger()
        self.interest_rules = InterestRuleTable()
        self.statements = StatementGenerator(
            self.ledger,
            self.interest_rules,
            day_count=self.config.interest_day_count
        )
    
    def record_transaction(
        self,
        txn_date: date,
        account_id: str,
        transaction_type: TransactionType,
        amount: Decimal
    ) -> List[StatementRow]:
        """Record a transaction; returns the account's full history, newest row last"""
        self.ledger.add_transaction(account_id, txn_date, transaction_type, amount)
        return self.account_history(account_id)
    
    def account_history(self, account_id: str) -> List[StatementRow]:
        """All of the account's transactions with a running balance"""
        return self.statements.account_history(account_id)
    
    def balance(self, account_id: str) -> Decimal:
        return self.ledger.balance_as_of(account_id)
    
    def define_interest_rule(self, effective_date: date, rule_id: str, rate: Decimal) -> List[InterestRule]:
        """Add or replace the rule for a date; returns every rule by date"""
        self.interest_rules.set_rule(effective_date, rule_id, rate)
        return self.interest_rule_list()
    
    def interest_rule_list(self) -> List[InterestRule]:
        return self.interest_rules.all_rules_sorted()
    
    def statement(self, account_id: str, year: int, month: int) -> Statement:
        return self.statements.generate(account_id, year, month)
