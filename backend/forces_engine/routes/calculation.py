"""Forces Calculation Route.

Thin transport around the calculation engine: validates the request,
runs the engine, projects the result into the requested output format
and wraps it in a response envelope.  All business logic lives in
service functions.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status

from .. import config
from ..errors import CustomWeightingError, EmptyBatchError
from ..schemas.request_schema import (
    CalculationRequest,
    CalculationResponse,
    ProcessingStats,
    ResponseMetadata,
)
from ..services.calculation_engine import calculate
from ..services.output_projector import project

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/jtbd",
    tags=["Calculation"],
)


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    response_model_exclude_none=True,
    summary="Calculate Force Readiness",
    response_description="Projected readiness calculation with request metadata",
)
def calculate_forces(request: CalculationRequest) -> CalculationResponse:
    """Aggregate classified items into a readiness calculation.

    Steps:
    1. Enforce the configured batch size limit
    2. Run the calculation engine
    3. Project into ``options.output_format``
    4. Wrap with request metadata
    """
    options = request.options
    total_requested = len(request.items)

    if total_requested > config.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"At most {config.MAX_BATCH_SIZE} items can be calculated per request, got {total_requested}",
        )

    try:
        run = calculate(request.items, options)
    except EmptyBatchError as exc:
        logger.warning("[CALCULATE] Empty batch: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except CustomWeightingError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    payload = project(run.result, options.output_format, run.metadata)

    return CalculationResponse(
        success=True,
        calculation=payload.model_dump(mode="json", exclude_none=True),
        metadata=ResponseMetadata(
            request_id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc).isoformat(),
            processing_stats=ProcessingStats(
                total_requested=total_requested,
                successfully_analyzed=run.metadata.total_processed,
                errors=len(run.metadata.errors),
                processing_time_ms=run.metadata.processing_time_ms,
            ),
            options=options,
        ),
    )
