"""
Logs router for workout logs and the shared feed.

This router contains endpoints for:
- GET /api/logs - Own logs, or the shared feed with ?shared=true
- POST /api/logs - Log a completed workout
- GET /api/logs/{log_id} - Get a log (owner, or anyone once shared)
- PUT /api/logs/{log_id} - Merge-update a log (owner only)
- DELETE /api/logs/{log_id} - Delete a log (owner only)
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from api.deps import get_logs_use_case, get_request_context
from api.errors import raise_for_failure
from api.schemas import LogCreateRequest, LogUpdateRequest
from application.authorization import RequestContext
from application.use_cases import LogsUseCase
from domain.models import PageRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/logs",
    tags=["Logs"],
)


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in ("true", "1", "yes")


@router.get("")
def list_logs_endpoint(
    shared: Optional[str] = Query(None, description="'true' for the shared community feed"),
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Items per page"),
    ctx: RequestContext = Depends(get_request_context),
    use_case: LogsUseCase = Depends(get_logs_use_case),
):
    """
    List logs, most recently completed first.

    Without ``shared`` this is the caller's own history; with
    ``shared=true`` it is every shared log, the caller's included.
    """
    result = use_case.list_logs(
        ctx,
        PageRequest.from_query(page, limit),
        shared=_is_truthy(shared),
    )
    if not result.success:
        raise_for_failure(result)
    return result.page.to_response()


@router.post("", status_code=201)
def create_log_endpoint(
    payload: Any = Body(None),
    ctx: RequestContext = Depends(get_request_context),
    use_case: LogsUseCase = Depends(get_logs_use_case),
):
    result = use_case.create_log(ctx, LogCreateRequest.from_body(payload).sent_fields())
    if not result.success:
        raise_for_failure(result)
    return {
        "message": "Workout logged successfully",
        "log": result.log.to_response(),
    }


@router.get("/{log_id}")
def get_log_endpoint(
    log_id: str,
    ctx: RequestContext = Depends(get_request_context),
    use_case: LogsUseCase = Depends(get_logs_use_case),
):
    result = use_case.get_log(ctx, log_id)
    if not result.success:
        raise_for_failure(result)
    return {"log": result.log.to_response()}


@router.put("/{log_id}")
def update_log_endpoint(
    log_id: str,
    payload: Any = Body(None),
    ctx: RequestContext = Depends(get_request_context),
    use_case: LogsUseCase = Depends(get_logs_use_case),
):
    """Merge-update a log. ``"isShared": false`` un-shares it."""
    result = use_case.update_log(ctx, log_id, LogUpdateRequest.from_body(payload).sent_fields())
    if not result.success:
        raise_for_failure(result)
    return {
        "message": "Log updated successfully",
        "log": result.log.to_response(),
    }


@router.delete("/{log_id}")
def delete_log_endpoint(
    log_id: str,
    ctx: RequestContext = Depends(get_request_context),
    use_case: LogsUseCase = Depends(get_logs_use_case),
):
    result = use_case.delete_log(ctx, log_id)
    if not result.success:
        raise_for_failure(result)
    return {"message": "Log deleted successfully"}
