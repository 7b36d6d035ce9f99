"""
Input Parsing

Turns the space-separated console lines into validated values for the
ledger, the interest rule table and the statement engine. Every failure
raises InvalidInputError (or InvalidRuleError for an out-of-range rate).
"""

from decimal import Decimal
from datetime import date, datetime
from typing import NamedTuple

from .errors import InvalidInputError, InvalidRuleError
from .interest import MIN_RATE, MAX_RATE
from .ledger import TransactionType
from .money import to_decimal


DATE_FORMAT = "%Y%m%d"


class TransactionInput(NamedTuple):
    date: date
    account_id: str
    transaction_type: TransactionType
    amount: Decimal


class InterestRuleInput(NamedTuple):
    date: date
    rule_id: str
    rate: Decimal


class StatementRequest(NamedTuple):
    account_id: str
    year: int
    month: int


def _split(line: str, expected: int, layout: str) -> list:
    parts = line.split()
    if len(parts) != expected:
        raise InvalidInputError(f"Expected {layout}, got '{line.strip()}'")
    return parts


def parse_date(text: str) -> date:
    """Parse an 8-digit yyyymmdd date"""
    if len(text) != 8 or not text.isdigit():
        raise InvalidInputError(f"Invalid date '{text}', expected yyyymmdd")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError(f"Invalid date '{text}', expected yyyymmdd")


def parse_decimal(text: str, field_name: str) -> Decimal:
    try:
        return to_decimal(text)
    except ValueError:
        raise InvalidInputError(f"Invalid {field_name} '{text}'")


def _require_id(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise InvalidInputError(f"Missing {field_name}")
    return value


def transaction_from_fields(date_text: str, account_id: str,
                            type_text: str, amount_text: str) -> TransactionInput:
    """Validate already-separated transaction fields"""
    txn_date = parse_date(date_text)
    account_id = _require_id(account_id, "account")
    transaction_type = TransactionType.from_code(type_text)
    amount = parse_decimal(amount_text, "amount")
    if amount <= Decimal('0'):
        raise InvalidInputError(f"Amount must be positive, got {amount_text}")
    
    return TransactionInput(txn_date, account_id, transaction_type, amount)


def interest_rule_from_fields(date_text: str, rule_id: str, rate_text: str) -> InterestRuleInput:
    """Validate already-separated interest rule fields"""
    rule_date = parse_date(date_text)
    rule_id = _require_id(rule_id, "rule id")
    rate = parse_decimal(rate_text, "rate")
    if not (MIN_RATE < rate < MAX_RATE):
        raise InvalidRuleError(f"Interest rate must be between 0 and 100 (exclusive), got {rate_text}")
    
    return InterestRuleInput(rule_date, rule_id, rate)


def statement_request_from_fields(account_id: str, period: str) -> StatementRequest:
    """Validate an account id and a yyyymm period"""
    account_id = _require_id(account_id, "account")
    if len(period) != 6 or not period.isdigit():
        raise InvalidInputError(f"Invalid period '{period}', expected yyyymm")
    
    year, month = int(period[:4]), int(period[4:])
    if not 1 <= month <= 12 or year < 1:
        raise InvalidInputError(f"Invalid period '{period}', expected yyyymm")
    
    return StatementRequest(account_id, year, month)


def parse_transaction(line: str) -> TransactionInput:
    """Parse '<Date> <Account> <Type> <Amount>'"""
    return transaction_from_fields(*_split(line, 4, "<Date> <Account> <Type> <Amount>"))


def parse_interest_rule(line: str) -> InterestRuleInput:
    """Parse '<Date> <RuleId> <Rate in %>'"""
    return interest_rule_from_fields(*_split(line, 3, "<Date> <RuleId> <Rate in %>"))


def parse_statement_request(line: str) -> StatementRequest:
    """Parse '<Account> <Year><Month>'"""
    return statement_request_from_fields(*_split(line, 2, "<Account> <Year><Month>"))
