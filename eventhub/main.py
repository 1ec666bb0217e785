import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from eventhub.api.endpoints import admin as admin_endpoints
from eventhub.api.endpoints import auth as auth_endpoints
from eventhub.api.endpoints import events as event_endpoints
from eventhub.api.endpoints import registrations as registration_endpoints
from eventhub.api.endpoints import sessions as session_endpoints
from eventhub.api.endpoints import team_members as team_member_endpoints
from eventhub.api.endpoints import teams as team_endpoints
from eventhub.api.endpoints import users as user_endpoints
from eventhub.core.config import settings
from eventhub.core.database import init_db

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error body carries a "message" field
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": "Invalid request", "errors": exc.errors()}),
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": str(exc)},
    )


app.include_router(auth_endpoints.router, prefix="/auth", tags=["Authentication"])
app.include_router(event_endpoints.router, prefix="/events", tags=["Events"])
app.include_router(session_endpoints.router, prefix="/sessions", tags=["Sessions"])
app.include_router(team_endpoints.router, prefix="/teams", tags=["Teams"])
app.include_router(team_member_endpoints.router, prefix="/team-members", tags=["Team Members"])
app.include_router(registration_endpoints.router, prefix="/registrations", tags=["Registrations"])
app.include_router(user_endpoints.router, prefix="/users", tags=["Users"])
app.include_router(admin_endpoints.router, prefix="/admin", tags=["Admin"])


@app.get("/")
async def root():
    return {"ok": True, "service": settings.PROJECT_NAME}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("eventhub.main:app", host="0.0.0.0", port=8000, reload=True)
