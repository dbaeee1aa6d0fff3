"""
Pydantic schemas for balances and settlements.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal


class MemberIn(BaseModel):
    """Schema for a trip member."""
    id: str = Field(min_length=1)
    name: str


class SplitIn(BaseModel):
    """Schema for a split entry; an amount or a percent depending on split type."""
    member_id: str = Field(min_length=1)
    amount: Decimal


class ExpenseIn(BaseModel):
    """Schema for an expense to include in a calculation."""
    paid_by: str = Field(min_length=1)
    amount: Decimal
    split_type: str = "equal"
    splits: Optional[List[SplitIn]] = None


class BalanceCalculationRequest(BaseModel):
    """Schema for a stateless balance calculation."""
    members: List[MemberIn]
    expenses: List[ExpenseIn] = []


class BalanceResponse(BaseModel):
    """Schema for a member's net balance."""
    member_id: str
    member_name: str
    balance: Decimal  # Positive = owed money, negative = owes money
    
    model_config = {"from_attributes": True}


class SettlementResponse(BaseModel):
    """Schema for a single suggested transfer."""
    from_member_id: str
    to_member_id: str
    amount: Decimal
    from_name: str
    to_name: str
    
    model_config = {"from_attributes": True}


class BalanceSheetResponse(BaseModel):
    """Schema for balances plus suggested settlements."""
    balances: List[BalanceResponse]
    settlements: List[SettlementResponse]
    
    model_config = {"from_attributes": True}
