from pydantic import BaseModel


class NetBalanceResponse(BaseModel):
    """Positive = others owe this identity; negative = it owes others."""
    identity: str
    net_balance: int


class PersonBalanceResponse(NetBalanceResponse):
    name: str
