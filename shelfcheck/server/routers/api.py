"""JSON API routes: /health, /api/v1/products/*."""

import json
import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from ...core.api import (
    build_repository,
    parse_draft_payload,
    validate_csv,
    validate_draft,
    validate_drafts,
)
from ...core.backend import BackendError, DraftValidationError
from ...core.validate import validate_product_form
from ...config import get_settings
from ..logging import draft_to_loggable
from ..schemas import BulkValidateRequest, DraftRequest

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _summarize(results: list) -> dict:
    rows = [result.to_dict() for result in results]
    return {
        "total": len(rows),
        "valid": sum(1 for row in rows if row["valid"]),
        "invalid": sum(1 for row in rows if not row["valid"]),
        "results": rows,
    }


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.post("/api/v1/products/validate")
def validate_product(payload: DraftRequest) -> dict:
    try:
        draft, auxiliary = parse_draft_payload(payload.to_core_payload())
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid product payload: {exc}") from exc

    logger.debug(
        "Validating product draft:\n%s",
        json.dumps(draft_to_loggable(draft, auxiliary), ensure_ascii=False, indent=2, default=str),
    )
    result = validate_draft(draft, auxiliary, require_images=payload.require_images)
    body = result.to_dict()
    body.pop("row", None)
    return body


@router.post("/api/v1/products", status_code=201)
def create_product(payload: DraftRequest) -> dict:
    try:
        draft, auxiliary = parse_draft_payload(payload.to_core_payload())
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid product payload: {exc}") from exc

    errors = validate_product_form(draft, auxiliary)
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})

    try:
        repository = build_repository(settings.core_config())
    except ValueError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    try:
        created = repository.create_product(draft, auxiliary, supplier_id=settings.supplier_id)
    except DraftValidationError as exc:
        raise HTTPException(status_code=422, detail={"errors": exc.errors}) from exc
    except BackendError as exc:
        raise HTTPException(status_code=502, detail=f"Backend error: {exc.message}") from exc
    except ValueError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return created


@router.post("/api/v1/products/bulk/validate")
def validate_products_bulk(payload: BulkValidateRequest) -> dict:
    try:
        results = validate_drafts(payload.products)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _summarize(results)


@router.post("/api/v1/products/bulk/csv")
def validate_products_csv(file: UploadFile = File(...)) -> dict:
    csv_bytes = file.file.read()
    try:
        results = validate_csv(csv_bytes)
    except ValueError as exc:
        detail = str(exc)
        if "exceeds 5 MB" in detail:
            raise HTTPException(status_code=413, detail=detail) from exc
        raise HTTPException(status_code=422, detail=detail) from exc
    return _summarize(results)
