import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from receipt_processor.deps import generate_receipt_id, get_scored_receipt, get_store
from receipt_processor.points import points_breakdown
from receipt_processor.ratelimit import limiter, process_rate_limit
from receipt_processor.schemas import PointsOut, ProcessOut, ReceiptIn
from receipt_processor.store.base import ReceiptStore, ScoredReceipt
from receipt_processor.validation import validation_errors

logger = logging.getLogger("receipt_processor")
router = APIRouter()

INVALID_RECEIPT = "The receipt is invalid"


@router.post("/receipts/process", response_model=ProcessOut)
@limiter.limit(process_rate_limit)
def process_receipt(
    request: Request,
    receipt: ReceiptIn,
    store: ReceiptStore = Depends(get_store),
):
    errors = validation_errors(receipt)
    if errors:
        logger.warning("Receipt rejected", extra={"extra_data": {"errors": errors}})
        raise HTTPException(status_code=400, detail={"message": INVALID_RECEIPT, "errors": errors})

    breakdown = points_breakdown(receipt)
    points = sum(breakdown.values())

    receipt_id = generate_receipt_id()
    store.put(receipt_id, ScoredReceipt(receipt=receipt, points=points))
    logger.info(
        "Receipt processed",
        extra={"extra_data": {"receipt_id": receipt_id, "points": points, "breakdown": breakdown}},
    )

    return {"id": receipt_id}


@router.get("/receipts/{receipt_id}/points", response_model=PointsOut)
def get_points(scored: ScoredReceipt = Depends(get_scored_receipt)):
    return {"points": scored.points}
