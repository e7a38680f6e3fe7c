from pydantic import BaseModel


class SettlementCreate(BaseModel):
    payee: str
    amount: int


class SettlementResponse(BaseModel):
    sequence: int
    payer: str
    payee: str
    amount: int
    emitted_at: int
