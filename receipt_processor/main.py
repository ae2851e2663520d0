import sentry_sdk
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from receipt_processor.config import CORS_ORIGINS, HOST, PORT, SENTRY_DSN
from receipt_processor.logging_config import setup_logging
from receipt_processor.middleware import RequestContextMiddleware
from receipt_processor.ratelimit import limiter
from receipt_processor.routes import receipts
from receipt_processor.store.factory import get_receipt_store

# Sentry
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        traces_sample_rate=0.1,
        send_default_pii=False,
    )

logger = setup_logging()

MALFORMED_RECEIPT = "The request body is not a valid receipt"


def _format_error(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{loc}: {error['msg']}" if loc else error["msg"]


async def malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_format_error(e) for e in exc.errors()]
    logger.warning("Malformed request", extra={"extra_data": {"path": request.url.path, "errors": errors}})
    return JSONResponse(
        status_code=400,
        content={"detail": {"message": MALFORMED_RECEIPT, "errors": errors}},
    )


app = FastAPI(title="Receipt Processor", version="0.1.0")
app.state.limiter = limiter
app.state.store = get_receipt_store()
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, malformed_request_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Request-ID"],
)
app.add_middleware(RequestContextMiddleware)

# Routes
app.include_router(receipts.router)


@app.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"


def run():
    logger.info("Starting server", extra={"extra_data": {"host": HOST, "port": PORT}})
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
