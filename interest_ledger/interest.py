"""
Interest Rule Table

Keeps the annual interest rate as a step function over time. Each rule takes
effect on its date and holds until a later rule supersedes it. At most one
rule exists per date; setting another on the same date replaces it.
"""

from bisect import bisect_right, insort
from decimal import Decimal
from datetime import date
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import InvalidRuleError
from .logging_config import get_logger, log_action


logger = get_logger("interest_ledger.interest")

MIN_RATE = Decimal('0')
MAX_RATE = Decimal('100')


@dataclass(frozen=True)
class InterestRule:
    """Annual rate in percent, effective from effective_date onward"""
    effective_date: date
    rule_id: str
    annual_rate_percent: Decimal
    
    def __post_init__(self):
        if not (MIN_RATE < self.annual_rate_percent < MAX_RATE):
            raise InvalidRuleError(
                f"Interest rate must be between 0 and 100 (exclusive), got {self.annual_rate_percent}"
            )


class InterestRuleTable:
    """Rules keyed by effective date, kept sorted for lookup"""
    
    def __init__(self):
        self._rules: Dict[date, InterestRule] = {}
        self._dates: List[date] = []  # Sorted ascending, mirrors _rules keys
    
    def __len__(self) -> int:
        return len(self._rules)
    
    def is_empty(self) -> bool:
        return not self._rules
    
    def set_rule(self, effective_date: date, rule_id: str, rate_percent: Decimal) -> InterestRule:
        """
        Insert a rule, replacing any existing rule on the same date
        
        Raises:
            InvalidRuleError: If the rate is not within (0, 100)
        """
        try:
            rule = InterestRule(effective_date, rule_id, rate_percent)
        except InvalidRuleError:
            log_action(logger, "warning", "Interest rule rejected",
                       action="set_rule", resource=rule_id,
                       extra={"rate": str(rate_percent)})
            raise
        
        replaced = self._rules.get(effective_date)
        if replaced is None:
            insort(self._dates, effective_date)
        self._rules[effective_date] = rule
        
        log_action(logger, "info", "Interest rule replaced" if replaced else "Interest rule added",
                   action="set_rule", resource=rule_id,
                   extra={"effective_date": effective_date.isoformat(), "rate": str(rate_percent)})
        return rule
    
    def rule_effective_on(self, on_date: date) -> Optional[InterestRule]:
        """Latest rule whose effective date is on or before on_date"""
        index = bisect_right(self._dates, on_date)
        if index == 0:
            return None
        return self._rules[self._dates[index - 1]]
    
    def rate_effective_on(self, on_date: date) -> Optional[Decimal]:
        """Annual rate in percent on the given date, None before the first rule"""
        rule = self.rule_effective_on(on_date)
        return rule.annual_rate_percent if rule else None
    
    def all_rules_sorted(self) -> List[InterestRule]:
        return [self._rules[d] for d in self._dates]
