import threading

from receipt_processor.store.base import ReceiptAlreadyExists, ScoredReceipt


class InMemoryReceiptStore:
    """Process-local receipt store. Contents are lost on restart."""

    def __init__(self):
        self._lock = threading.Lock()
        self._receipts: dict[str, ScoredReceipt] = {}

    def put(self, receipt_id: str, value: ScoredReceipt) -> None:
        with self._lock:
            if receipt_id in self._receipts:
                raise ReceiptAlreadyExists(receipt_id)
            self._receipts[receipt_id] = value

    def get(self, receipt_id: str) -> ScoredReceipt | None:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
