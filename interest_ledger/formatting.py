"""
Table Rendering

Renders statement rows and interest rules as the pipe-delimited tables shown
by the console.
"""

from typing import Iterable, List

from .interest import InterestRule
from .statements import StatementRow
from .money import format_amount


STATEMENT_HEADER = "| Date     | Txn Id      | Type | Amount | Balance |"
RULES_HEADER = "| Date     | RuleId | Rate (%) |"


def format_statement_row(row: StatementRow) -> str:
    fields = row.to_display()
    if row.is_interest:
        # Interest lines leave the id column blank and pad the type column
        middle = "|             | I    |"
    else:
        middle = f"| {fields['transaction_id']} | {fields['type']} |"
    return f"| {fields['date']} {middle} {fields['amount']:>6} | {fields['balance']:>8} |"


def render_statement(account_id: str, rows: Iterable[StatementRow]) -> List[str]:
    lines = [f"Account: {account_id}", STATEMENT_HEADER]
    lines.extend(format_statement_row(row) for row in rows)
    return lines


def rule_display(rule: InterestRule) -> dict:
    return {
        "date": f"{rule.effective_date:%Y%m%d}",
        "rule_id": rule.rule_id,
        "rate": format_amount(rule.annual_rate_percent),
    }


def render_rules(rules: Iterable[InterestRule]) -> List[str]:
    lines = ["Interest rules:", RULES_HEADER]
    for rule in rules:
        fields = rule_display(rule)
        lines.append(f"| {fields['date']} | {fields['rule_id']} | {fields['rate']:>8} |")
    return lines
