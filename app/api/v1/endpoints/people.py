from typing import List
from fastapi import APIRouter, Depends

from app.core.auth import get_caller_identity
from app.db.store import LedgerStore, get_store
from app.repositories.person_repo import PersonRepository
from app.schemas.person import CountResponse, PersonCreate, PersonResponse, PersonUpdate

router = APIRouter()

@router.post("", response_model=PersonResponse)
async def register_person(
    person_in: PersonCreate,
    caller: str = Depends(get_caller_identity),
    store: LedgerStore = Depends(get_store)
):
    """Register the calling identity under a display name."""
    person = PersonRepository(store).register(caller, person_in.name)
    return PersonResponse.model_validate(person)

@router.patch("/me", response_model=PersonResponse)
async def update_my_name(
    person_in: PersonUpdate,
    caller: str = Depends(get_caller_identity),
    store: LedgerStore = Depends(get_store)
):
    """Correct the calling identity's display name."""
    person = PersonRepository(store).update_name(caller, person_in.name)
    return PersonResponse.model_validate(person)

@router.get("", response_model=List[PersonResponse])
async def list_people(store: LedgerStore = Depends(get_store)):
    """All registered people in registration order."""
    return [
        PersonResponse.model_validate(person)
        for person in PersonRepository(store).list_people()
    ]

@router.get("/count", response_model=CountResponse)
async def count_people(store: LedgerStore = Depends(get_store)):
    return CountResponse(count=PersonRepository(store).count())

@router.get("/{identity}", response_model=PersonResponse)
async def lookup_person(identity: str, store: LedgerStore = Depends(get_store)):
    """Look up any identity; unknown ones come back unregistered."""
    name, identity, is_registered = PersonRepository(store).lookup(identity)
    return PersonResponse(name=name, identity=identity, is_registered=is_registered)
