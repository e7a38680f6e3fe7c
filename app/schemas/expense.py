from typing import List
from pydantic import BaseModel, Field, ConfigDict


class ExpenseCreate(BaseModel):
    """
    New expense request.

    participants, paid_amounts and owed_amounts are positional: entry i of
    each list belongs to the same participant. Amounts are integers in the
    smallest currency unit.
    """
    label: str
    participants: List[str]
    paid_amounts: List[int]
    owed_amounts: List[int]


class ExpenseCreated(BaseModel):
    id: int


class ExpenseInfoResponse(BaseModel):
    id: int
    label: str
    timestamp: int

    model_config = ConfigDict(from_attributes=True)


class ParticipantShare(BaseModel):
    identity: str
    amount_paid: int
    amount_owed: int


class ExpenseResponse(BaseModel):
    """Full expense record, with amounts read back per participants entry."""
    id: int
    label: str
    timestamp: int
    participants: List[ParticipantShare] = Field(default_factory=list)


class AmountResponse(BaseModel):
    expense_id: int
    identity: str
    amount: int


class LastLabelResponse(BaseModel):
    label: str
