from receipt_processor.config import RECEIPT_STORE
from receipt_processor.store.base import ReceiptStore
from receipt_processor.store.memory import InMemoryReceiptStore


def get_receipt_store(backend: str | None = None) -> ReceiptStore:
    """Return a new store for the configured backend."""
    backend = backend or RECEIPT_STORE
    if backend == "memory":
        return InMemoryReceiptStore()
    raise ValueError(f"Unknown receipt store: {backend}")
