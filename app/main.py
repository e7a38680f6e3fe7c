from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.store import open_store, close_store
from app.api.v1.api import api_router
from app.utils.ledger_validation import ErrorCode, LedgerError

configure_logging()

ERROR_STATUS = {
    ErrorCode.NOT_REGISTERED: status.HTTP_404_NOT_FOUND,
    ErrorCode.ID_OUT_OF_BOUNDS: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_EXPENSES: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    open_store()
    yield
    close_store()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
        content={"detail": str(exc), "code": exc.code.value}
    )

@app.get("/")
async def root():
    return {"message": "Welcome to Splitledger API"}

app.include_router(api_router, prefix=settings.API_V1_STR)
