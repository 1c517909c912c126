from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from models import Receipt


class ReadWriteLock:
    """
    A readers/writer lock.

    Every reader and writer passes through a turnstile. A waiting writer
    holds the turnstile, so new readers queue behind it instead of starving
    it, and readers that arrive after the write are let in as soon as it ends.
    """

    def __init__(self) -> None:
        self._turnstile = threading.Lock()
        self._readersDone = threading.Condition(threading.Lock())
        self._readers = 0

    @contextmanager
    def readLocked(self) -> Iterator[None]:
        with self._turnstile:
            with self._readersDone:
                self._readers += 1
        try:
            yield
        finally:
            with self._readersDone:
                self._readers -= 1
                if self._readers == 0:
                    self._readersDone.notify_all()

    @contextmanager
    def writeLocked(self) -> Iterator[None]:
        with self._turnstile:
            with self._readersDone:
                while self._readers > 0:
                    self._readersDone.wait()
                yield


class ReceiptStorage:
    """Maps receipt identifiers to receipts. Entries are never deleted."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._idToReceipt: Dict[str, Receipt] = {}

    def getReceipt(self, receiptId: str) -> Optional[Receipt]:
        """
        Get the receipt stored under an identifier.

        Args:
            receiptId (str): The identifier the receipt was stored with.

        Returns:
            Optional[Receipt]: A copy of the stored receipt, or None if absent.
        """
        with self._lock.readLocked():
            receipt = self._idToReceipt.get(receiptId)
        return None if receipt is None else receipt.model_copy(deep=True)

    def setReceipt(self, receiptId: str, receipt: Receipt) -> None:
        """
        Save the receipt under an identifier, replacing any earlier receipt.

        Args:
            receiptId (str): The identifier to store the receipt with.
            receipt (Receipt): The receipt to store. A copy is kept.
        """
        snapshot = receipt.model_copy(deep=True)
        with self._lock.writeLocked():
            self._idToReceipt[receiptId] = snapshot
