"""Fire-and-forget wrapper around another ProductRepository.

save_all() snapshots the collection and returns at once; a single
background writer thread hands snapshots to the wrapped repository in
the order they were queued. When several snapshots pile up only the
newest is written, so storage always converges to the last mutation.
"""

from __future__ import annotations

import atexit
import logging
import queue
import threading
from dataclasses import replace

from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

_STOP = object()


class QueuedProductRepository(ProductRepository):
    """Serializes writes to ``inner`` on one background thread.

    Usage:
        repo = QueuedProductRepository(JsonProductRepository(data_dir))
        repo.save_all(products)   # returns immediately
        repo.flush()              # blocks until written
        repo.close()              # flush and stop the writer
    """

    def __init__(self, inner: ProductRepository) -> None:
        self._inner = inner
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="stockroom-writer", daemon=True
        )
        self._thread.start()
        atexit.register(self.close)

    # --- ProductRepository interface ------------------------------------------

    def load_all(self) -> list[Product]:
        self.flush()
        return self._inner.load_all()

    def save_all(self, products: list[Product]) -> None:
        # Products are mutated in place by the manager, so queue copies
        snapshot = [replace(p) for p in products]
        if self._closed:
            logger.debug("Writer closed, saving %d product(s) inline", len(snapshot))
            self._inner.save_all(snapshot)
            return
        self._queue.put(snapshot)

    def flush(self) -> None:
        self._queue.join()

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._thread.join()
        atexit.unregister(self.close)
        self._inner.close()
        logger.debug("Background writer stopped")

    # --- Worker ---------------------------------------------------------------

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            taken = 1
            stop = item is _STOP
            latest = None if stop else item

            # Coalesce whatever else is already waiting
            while True:
                try:
                    item = self._queue.get_nowait()
                except queue.Empty:
                    break
                taken += 1
                if item is _STOP:
                    stop = True
                else:
                    latest = item

            try:
                if latest is not None:
                    self._inner.save_all(latest)  # type: ignore[arg-type]
            except Exception:
                logger.exception("Background write failed")
            finally:
                for _ in range(taken):
                    self._queue.task_done()

            if stop:
                return
