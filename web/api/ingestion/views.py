"""Ingestion API views - authenticate, validate the body, run the job."""

import json

from pydantic import BaseModel
from pydantic import ValidationError as BodyValidationError

import settings
from etl.helpers import IngestOptions
from etl.run_log import detect_trigger
from etl.sync import sync
from web.api.errors import (
    ConfigurationError,
    MethodNotAllowedError,
    UnauthorizedError,
    ValidationError,
    handle_request,
)

from .schemas import IngestDeputiesResponse, IngestResponse, IngestScrutinsResponse

ALLOWED_METHODS = ("POST", "GET")


def _header(headers: dict | None, name: str) -> str | None:
    for key, value in (headers or {}).items():
        if key.lower() == name.lower():
            return value
    return None


def authenticate(headers: dict | None) -> str:
    """Check the shared secret and return the trigger source (`cron` or `manual`)."""
    secrets = [s for s in (settings.CRON_SECRET, settings.INGESTION_SECRET) if s]
    if not secrets:
        raise ConfigurationError("No ingestion secret configured")

    authorization = _header(headers, "Authorization")
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")
    token = authorization.removeprefix("Bearer ").strip()
    if token not in secrets:
        raise UnauthorizedError("Invalid credentials")
    return detect_trigger(authorization, settings.CRON_SECRET)


def parse_options(body: dict | str | bytes | None) -> IngestOptions:
    """Validate a JSON body (`date`, `fromDate`/`toDate`, `dryRun`, `legislature`)."""
    try:
        if isinstance(body, (str, bytes)):
            body = json.loads(body) if body.strip() else {}
        if body is not None and not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return IngestOptions.model_validate(body or {})
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON body: {e.msg}") from e
    except BodyValidationError as e:
        details = "; ".join(f"{'.'.join(map(str, err['loc'])) or 'body'}: {err['msg']}" for err in e.errors())
        raise ValidationError(details) from e


def _run(job_name: str, response: type[BaseModel], method: str, headers: dict | None, body) -> tuple[int, dict]:
    def view() -> dict:
        if method.upper() not in ALLOWED_METHODS:
            raise MethodNotAllowedError(f"Method {method} not allowed")
        triggered_by = authenticate(headers)
        options = parse_options(body)
        result = sync(job_name, options, triggered_by)
        return response(**result).model_dump()

    return handle_request(view)


def ingest_view(method: str, headers: dict | None = None, body=None) -> tuple[int, dict]:
    """Sittings, agenda items and dossiers."""
    return _run("ingest", IngestResponse, method, headers, body)


def ingest_scrutins_view(method: str, headers: dict | None = None, body=None) -> tuple[int, dict]:
    return _run("ingest-scrutins", IngestScrutinsResponse, method, headers, body)


def ingest_deputies_view(method: str, headers: dict | None = None, body=None) -> tuple[int, dict]:
    return _run("ingest-deputies", IngestDeputiesResponse, method, headers, body)
