"""
Interest rule endpoints
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends, status

from .dependencies import get_banking_system
from .schemas import InterestRuleModel, InterestRuleRequest
from ..errors import LedgerError
from ..parsing import interest_rule_from_fields
from ..system import BankingSystem


router = APIRouter()


@router.post("", response_model=List[InterestRuleModel], status_code=status.HTTP_201_CREATED)
async def define_interest_rule(
    request: InterestRuleRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Add or replace the rule for a date; returns all rules"""
    try:
        rules = system.define_interest_rule(
            *interest_rule_from_fields(request.date, request.rule_id, request.rate)
        )
    except LedgerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    return [InterestRuleModel.from_rule(rule) for rule in rules]


@router.get("", response_model=List[InterestRuleModel])
async def list_interest_rules(system: BankingSystem = Depends(get_banking_system)):
    """List rules by effective date"""
    return [InterestRuleModel.from_rule(rule) for rule in system.interest_rule_list()]
