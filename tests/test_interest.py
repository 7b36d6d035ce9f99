"""
Test suite for interest module

Tests the interest rule table as a step function of annual rate over time,
including same-date replacement and out-of-order insertion.
"""

import pytest
from decimal import Decimal
from datetime import date

from interest_ledger.errors import InvalidRuleError
from interest_ledger.interest import InterestRule, InterestRuleTable


class TestInterestRule:
    """Test interest rule validation"""
    
    def test_valid_rule(self):
        """Test creating a valid rule"""
        rule = InterestRule(date(2023, 1, 1), "RULE01", Decimal('1.95'))
        
        assert rule.effective_date == date(2023, 1, 1)
        assert rule.rule_id == "RULE01"
        assert rule.annual_rate_percent == Decimal('1.95')
    
    @pytest.mark.parametrize("rate", ["0", "100", "-1", "150"])
    def test_rate_out_of_range(self, rate):
        """Test that rates outside (0, 100) are rejected"""
        with pytest.raises(InvalidRuleError, match="between 0 and 100"):
            InterestRule(date(2023, 1, 1), "RULE01", Decimal(rate))


class TestInterestRuleTable:
    """Test rule table lookups"""
    
    def setup_method(self):
        """Set up test fixtures"""
        self.table = InterestRuleTable()
    
    def test_empty_table(self):
        """Test that an empty table has no rate"""
        assert self.table.is_empty()
        assert self.table.rate_effective_on(date(2023, 6, 1)) is None
        assert self.table.all_rules_sorted() == []
    
    def test_same_date_replaces(self):
        """Test that a second rule on the same date replaces the first"""
        self.table.set_rule(date(2023, 6, 15), "RULE03", Decimal('2.20'))
        self.table.set_rule(date(2023, 6, 15), "RULE04", Decimal('2.50'))
        
        rules = self.table.all_rules_sorted()
        assert len(rules) == 1
        assert rules[0].rule_id == "RULE04"
        assert self.table.rate_effective_on(date(2023, 6, 15)) == Decimal('2.50')
    
    def test_out_of_order_insertion(self):
        """Test that lookups are correct whatever the insertion order"""
        self.table.set_rule(date(2023, 6, 15), "RULE03", Decimal('2.20'))
        self.table.set_rule(date(2023, 1, 1), "RULE01", Decimal('1.90'))
        self.table.set_rule(date(2023, 5, 20), "RULE02", Decimal('1.95'))
        
        assert [r.rule_id for r in self.table.all_rules_sorted()] == ["RULE01", "RULE02", "RULE03"]
        assert self.table.rate_effective_on(date(2023, 6, 10)) == Decimal('1.95')
        assert self.table.rate_effective_on(date(2023, 3, 1)) == Decimal('1.90')
    
    def test_step_boundaries(self):
        """Test the rate steps exactly on each effective date"""
        self.table.set_rule(date(2023, 1, 1), "RULE01", Decimal('1.90'))
        self.table.set_rule(date(2023, 5, 20), "RULE02", Decimal('1.95'))
        self.table.set_rule(date(2023, 6, 15), "RULE03", Decimal('2.20'))
        
        assert self.table.rate_effective_on(date(2022, 12, 31)) is None
        assert self.table.rate_effective_on(date(2023, 1, 1)) == Decimal('1.90')
        assert self.table.rate_effective_on(date(2023, 5, 19)) == Decimal('1.90')
        assert self.table.rate_effective_on(date(2023, 5, 20)) == Decimal('1.95')
        assert self.table.rate_effective_on(date(2023, 6, 14)) == Decimal('1.95')
        assert self.table.rate_effective_on(date(2023, 6, 15)) == Decimal('2.20')
        assert self.table.rate_effective_on(date(2030, 1, 1)) == Decimal('2.20')
    
    def test_rule_effective_on(self):
        """Test looking up the full rule"""
        self.table.set_rule(date(2023, 1, 1), "RULE01", Decimal('1.90'))
        
        rule = self.table.rule_effective_on(date(2023, 2, 1))
        assert rule.rule_id == "RULE01"
    
    def test_invalid_rule_leaves_table_unchanged(self):
        """Test that a rejected rule has no effect"""
        self.table.set_rule(date(2023, 1, 1), "RULE01", Decimal('1.90'))
        
        with pytest.raises(InvalidRuleError):
            self.table.set_rule(date(2023, 1, 1), "RULE02", Decimal('100'))
        
        assert len(self.table) == 1
        assert self.table.rate_effective_on(date(2023, 1, 1)) == Decimal('1.90')
