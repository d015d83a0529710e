import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .formatters import format_license_plate, format_phone_number
from .metrics import REGISTRATION_RULE_FAILURES, REGISTRATION_VALIDATIONS
from .options import form_options
from .schemas import (
    DriverRegistrationInput,
    FormatRequest,
    PassengerRegistrationInput,
    Role,
    SignupRequest,
)
from .validator import ValidationResult, check_driver, check_passenger

# ---------------------------------------------------------
# Logging
# ---------------------------------------------------------
logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")
logger = logging.getLogger(settings.service_name)

# ---------------------------------------------------------
# FastAPI Setup
# ---------------------------------------------------------
app = FastAPI(title="Registration Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------
# Standard API Response
# ---------------------------------------------------------
class APIResponse(JSONResponse):
    def __init__(self, success: bool, data: Optional[Any] = None, message: Optional[str] = None,
                 status_code: int = 200):
        content = {"success": success, "data": data, "message": message}
        super().__init__(content=content, status_code=status_code)


# ---------------------------------------------------------
# Exception Handling
# ---------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return APIResponse(success=False, message=str(exc.detail), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return APIResponse(success=False, data=errors, message="Malformed request body", status_code=422)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[Registration] Unhandled error on {request.url.path}: {exc}")
    return APIResponse(success=False, message="Internal server error", status_code=500)


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------
def _record(kind: Role, result: ValidationResult) -> ValidationResult:
    outcome = "valid" if result.valid else "invalid"
    REGISTRATION_VALIDATIONS.labels(account_kind=kind.value, outcome=outcome).inc()
    if not result.valid:
        REGISTRATION_RULE_FAILURES.labels(account_kind=kind.value, field=result.field).inc()
    return result


def _validation_response(result: ValidationResult) -> APIResponse:
    if result.valid:
        return APIResponse(success=True, message="Registration input is valid")
    return APIResponse(success=False, data={"field": result.field}, message=result.message)


# ---------------------------------------------------------
# Routes
# ---------------------------------------------------------
@app.get("/health")
def health():
    return APIResponse(success=True, message="Registration service is alive")


@app.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.post("/validate/passenger")
def validate_passenger_input(req: PassengerRegistrationInput):
    return _validation_response(_record(Role.passenger, check_passenger(req)))


@app.post("/validate/driver")
def validate_driver_input(req: DriverRegistrationInput):
    return _validation_response(_record(Role.driver, check_driver(req)))


@app.post("/signup")
def signup(req: SignupRequest):
    data = req.to_input()
    if req.role == Role.driver:
        result = _record(Role.driver, check_driver(data))
    else:
        result = _record(Role.passenger, check_passenger(data))

    if not result.valid:
        raise HTTPException(status_code=400, detail=result.message)

    logger.info(f"[Registration] Accepted {req.role.value} signup: {data.email}")
    accepted = {"role": req.role.value, **data.model_dump(exclude={"password"})}
    return APIResponse(success=True, data=accepted, message="Registration accepted")


@app.post("/format/phone-number")
def format_phone_number_input(req: FormatRequest):
    return APIResponse(success=True, data={"value": format_phone_number(req.value)})


@app.post("/format/license-plate")
def format_license_plate_input(req: FormatRequest):
    return APIResponse(success=True, data={"value": format_license_plate(req.value)})


@app.get("/options")
def options():
    return APIResponse(success=True, data=form_options())
