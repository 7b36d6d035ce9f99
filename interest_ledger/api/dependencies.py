"""
Request dependencies
"""

from fastapi import Request

from ..system import BankingSystem


def get_banking_system(request: Request) -> BankingSystem:
    """The BankingSystem owned by the running app"""
    return request.app.state.banking_system
