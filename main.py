# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Mailchimp Proxy Service
=======================
Local REST API over mailing lists and list members, mirrored to Mailchimp.
Reads are served from the local store; every mutation is written both
locally and to Mailchimp, in an order that never leaves a local row pointing
at a remote resource Mailchimp refused or already deleted:

    create:  validate ─► save locally ─► POST to Mailchimp ─► save mail_chimp_id
    update:  validate ─► PATCH/PUT to Mailchimp ─► save locally
    delete:  DELETE on Mailchimp ─► remove locally

Port: 8000
"""
from contextlib import asynccontextmanager
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mailchimp_proxy.controllers import list_controller, member_controller, system_controller
from mailchimp_proxy.core.config import settings
from mailchimp_proxy.core.database import engine, init_schema
from mailchimp_proxy.core.dependencies import (
    get_list_repo, get_mailchimp_client, get_member_repo,
)
from mailchimp_proxy.core.errors import SyncError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import LISTS_STORED, MEMBERS_STORED
from mailchimp_proxy.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        init_schema(engine)
        LISTS_STORED.set(get_list_repo().count())
        MEMBERS_STORED.set(get_member_repo().count())
        logger.info("Schema ready, gauges loaded from DB")
    except Exception:
        logger.warning("Could not prepare schema, DB may not be ready yet")
    yield
    get_mailchimp_client().close()
    engine.dispose()
    logger.info("Shutting down: Mailchimp client closed, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Mailchimp Proxy Service",
    description="CRUD proxy keeping local mailing lists and members in sync with Mailchimp.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(SyncError)
async def sync_error_handler(request: Request, exc: SyncError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error["loc"] if part != "body"]
        errors.setdefault(".".join(loc) or "body", []).append(error["msg"])
    return JSONResponse(status_code=400, content={"message": "Invalid data given", "errors": errors})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(list_controller.router)
app.include_router(member_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
