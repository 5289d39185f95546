import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from donorhub.config import settings
from donorhub.database import Base, engine
from donorhub.models import blog, donation_request, funding, user  # noqa: F401  (register tables)
from donorhub.routers import blogs, donation_requests, statistics, users
from donorhub.utils.response import create_response, handle_exception, validation_error_response
from seed import run_seed

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Auto create tables
Base.metadata.create_all(bind=engine)

# CORS for SPA / API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    logger.info("Rejected %s %s: invalid %s", request.method, request.url.path, ", ".join(fields))
    return validation_error_response(exc.errors())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return handle_exception(exc)


# Seed default admin on startup
@app.on_event("startup")
def startup_event():
    run_seed()


# Add routes
app.include_router(users.router)
app.include_router(donation_requests.router)
app.include_router(blogs.router)
app.include_router(statistics.router)


@app.get("/")
def home():
    try:
        return create_response(
            message="Server is running",
            data={"service": "donorhub-backend"},
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


def run():
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run("donorhub.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
