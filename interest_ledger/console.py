"""
Console Menu

Interactive front end for the banking system. Reads lines, parses them into
ledger operations and prints the resulting tables. Input and output callables
are injectable so the loop runs without a terminal.
"""

from typing import Callable, Optional

from .errors import LedgerError
from .formatting import render_rules, render_statement
from .logging_config import get_logger
from .parsing import parse_interest_rule, parse_statement_request, parse_transaction
from .system import BankingSystem


logger = get_logger("interest_ledger.console")

INVALID_INPUT = "Invalid input. Please try again."

TRANSACTION_PROMPT = (
    "Please enter transaction details in <Date> <Account> <Type> <Amount> format "
    "(or enter blank to go back to main menu):"
)
RULE_PROMPT = (
    "Please enter interest rules details in <Date> <RuleId> <Rate in %> format "
    "(or enter blank to go back to main menu):"
)
STATEMENT_PROMPT = (
    "Please enter account and month to generate the statement <Account> <Year><Month> "
    "(or enter blank to go back to main menu):"
)


class BankConsole:
    """Menu loop: [T]ransactions, [I]nterest rules, [P]rint statement, [Q]uit"""
    
    def __init__(self, system: BankingSystem,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.system = system
        self._input = input_func
        self._output = output_func
        self.bank_name = system.config.bank_name
    
    def _read(self) -> Optional[str]:
        """Next line, or None when input is exhausted"""
        try:
            return self._input(">")
        except EOFError:
            return None
    
    def _write_lines(self, lines) -> None:
        for line in lines:
            self._output(line)
    
    def run(self) -> None:
        greeting = f"Welcome to {self.bank_name}! What would you like to do?"
        while True:
            self._output(greeting)
            self._output("[T] Input transactions")
            self._output("[I] Define interest rules")
            self._output("[P] Print statement")
            self._output("[Q] Quit")
            
            choice = self._read()
            if choice is None:
                break
            choice = choice.strip().upper()
            
            if choice == "T":
                self.input_transactions()
            elif choice == "I":
                self.define_interest_rules()
            elif choice == "P":
                self.print_statement()
            elif choice == "Q":
                break
            greeting = "Is there anything else you'd like to do?"
        
        self._output(f"Thank you for banking with {self.bank_name}.")
        self._output("Have a nice day!")
    
    def input_transactions(self) -> None:
        while True:
            self._output(TRANSACTION_PROMPT)
            line = self._read()
            if line is None or not line.strip():
                return
            try:
                parsed = parse_transaction(line)
                history = self.system.record_transaction(*parsed)
            except LedgerError as e:
                logger.info(f"Rejected transaction input: {e}")
                self._output(INVALID_INPUT)
                continue
            self._write_lines(render_statement(parsed.account_id, history))
    
    def define_interest_rules(self) -> None:
        while True:
            self._output(RULE_PROMPT)
            line = self._read()
            if line is None or not line.strip():
                return
            try:
                rules = self.system.define_interest_rule(*parse_interest_rule(line))
            except LedgerError as e:
                logger.info(f"Rejected interest rule input: {e}")
                self._output(INVALID_INPUT)
                continue
            self._write_lines(render_rules(rules))
    
    def print_statement(self) -> None:
        self._output(STATEMENT_PROMPT)
        line = self._read()
        if line is None or not line.strip():
            return
        try:
            request = parse_statement_request(line)
            statement = self.system.statement(*request)
        except LedgerError as e:
            logger.info(f"Rejected statement request: {e}")
            self._output(INVALID_INPUT)
            return
        self._write_lines(render_statement(request.account_id, statement))
