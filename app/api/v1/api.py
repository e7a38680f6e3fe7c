from fastapi import APIRouter
from app.api.v1.endpoints import people, expenses, balances, settlements, events

api_router = APIRouter()

api_router.include_router(people.router, prefix="/people", tags=["people"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(balances.router, prefix="/balances", tags=["balances"])
api_router.include_router(settlements.router, prefix="/settlements", tags=["settlements"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
