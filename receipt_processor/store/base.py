from typing import Protocol

from pydantic import BaseModel, ConfigDict

from receipt_processor.schemas import ReceiptIn


class ScoredReceipt(BaseModel):
    receipt: ReceiptIn
    points: int

    model_config = ConfigDict(frozen=True)


class ReceiptAlreadyExists(Exception):
    """Raised when a store is asked to overwrite an existing receipt id."""


class ReceiptStore(Protocol):
    def put(self, receipt_id: str, value: ScoredReceipt) -> None: ...

    def get(self, receipt_id: str) -> ScoredReceipt | None: ...
