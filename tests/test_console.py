"""
Test suite for console module

Drives the menu loop with scripted input and checks the printed tables.
"""

import pytest

from interest_ledger.config import LedgerConfig
from interest_ledger.console import BankConsole, INVALID_INPUT
from interest_ledger.formatting import RULES_HEADER, STATEMENT_HEADER
from interest_ledger.system import BankingSystem


def run_script(lines, system=None):
    """Run the console over the given input lines; returns printed lines"""
    system = system or BankingSystem(LedgerConfig())
    remaining = iter(lines)
    output = []
    
    def fake_input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    
    BankConsole(system, input_func=fake_input, output_func=output.append).run()
    return output


class TestBankConsole:
    """Test the interactive menu"""
    
    def test_quit(self):
        """Test the menu greets and says goodbye"""
        output = run_script(["q"])
        
        assert output[0] == "Welcome to AwesomeGIC Bank! What would you like to do?"
        assert output[-2] == "Thank you for banking with AwesomeGIC Bank."
        assert output[-1] == "Have a nice day!"
    
    def test_end_of_input_exits(self):
        """Test the loop ends cleanly when input runs out"""
        output = run_script([])
        
        assert output[-1] == "Have a nice day!"
    
    def test_transactions_print_account(self):
        """Test each accepted transaction prints the full account"""
        output = run_script([
            "T",
            "20230505 AC001 D 100.00",
            "20230601 AC001 W 20",
            "",
            "Q",
        ])
        
        assert "Account: AC001" in output
        assert STATEMENT_HEADER in output
        assert "| 20230505 | 20230505-01 | D | 100.00 |   100.00 |" in output
        assert "| 20230601 | 20230601-02 | W |  20.00 |    80.00 |" in output
        assert "Is there anything else you'd like to do?" in output
    
    def test_invalid_transactions_reprompt(self):
        """Test rejected input prints the generic message and keeps going"""
        system = BankingSystem(LedgerConfig())
        output = run_script([
            "T",
            "20230601 AC009 W 10.00",
            "20230601 AC001 D abc",
            "20230601 AC001 D 10.00",
            "20230602 AC001 W 10.01",
            "",
            "Q",
        ], system)
        
        assert output.count(INVALID_INPUT) == 3
        assert not system.ledger.has_account("AC009")
        assert len(system.ledger.transactions("AC001")) == 1
    
    def test_interest_rules_listing(self):
        """Test rules are listed sorted after each definition"""
        output = run_script([
            "I",
            "20230615 RULE03 2.20",
            "20230101 RULE01 1.95",
            "20230101 RULE02 1.90",
            "20230101 RULE04 100",
            "",
            "Q",
        ])
        
        assert RULES_HEADER in output
        assert INVALID_INPUT in output
        
        last_listing = len(output) - 1 - output[::-1].index("Interest rules:")
        assert output[last_listing + 2:last_listing + 4] == [
            "| 20230101 | RULE02 |     1.90 |",
            "| 20230615 | RULE03 |     2.20 |",
        ]
    
    def test_print_statement(self):
        """Test the monthly statement with its interest row"""
        output = run_script([
            "T",
            "20230505 AC001 D 100.00",
            "20230601 AC001 W 20.00",
            "",
            "I",
            "20230101 RULE01 1.90",
            "20230520 RULE02 1.95",
            "20230615 RULE03 2.20",
            "",
            "P",
            "AC001 202306",
            "Q",
        ])
        
        start = len(output) - 1 - output[::-1].index("Account: AC001")
        tail = output[start:start + 4]
        assert tail[0] == "Account: AC001"
        assert tail[1] == STATEMENT_HEADER
        assert tail[2] == "| 20230601 | 20230601-02 | W |  20.00 |   -20.00 |"
        assert tail[3] == "| 20230630 |             | I    |  -0.03 |   -20.03 |"
    
    def test_print_statement_unknown_account(self):
        """Test statements for unknown accounts are rejected"""
        output = run_script(["P", "AC404 202306", "Q"])
        
        assert INVALID_INPUT in output
    
    def test_custom_bank_name(self):
        """Test the greeting uses the configured bank name"""
        system = BankingSystem(LedgerConfig(bank_name="Test Bank"))
        output = run_script(["Q"], system)
        
        assert output[0] == "Welcome to Test Bank! What would you like to do?"
