from pydantic import BaseModel, Field, ConfigDict


class PersonCreate(BaseModel):
    """Registration request; the identity comes from the caller."""
    name: str = Field(..., max_length=100)


class PersonUpdate(BaseModel):
    name: str = Field(..., max_length=100)


class PersonResponse(BaseModel):
    name: str
    identity: str
    is_registered: bool

    model_config = ConfigDict(from_attributes=True)


class CountResponse(BaseModel):
    count: int
