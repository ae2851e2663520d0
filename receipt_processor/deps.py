import logging
import uuid

from fastapi import Depends, HTTPException, Request

from receipt_processor.store.base import ReceiptStore, ScoredReceipt

logger = logging.getLogger("receipt_processor")


def generate_receipt_id() -> str:
    return str(uuid.uuid4())


def get_store(request: Request) -> ReceiptStore:
    """Return the receipt store the app was started with."""
    return request.app.state.store


def get_scored_receipt(
    receipt_id: str,
    store: ReceiptStore = Depends(get_store),
) -> ScoredReceipt:
    scored = store.get(receipt_id)
    if scored is None:
        logger.info("Receipt not found", extra={"extra_data": {"receipt_id": receipt_id}})
        raise HTTPException(status_code=404, detail="No receipt found for that id")
    return scored
