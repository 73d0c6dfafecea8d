import threading
import time


class CallContext:
    """Per-call execution context carrying a cancel flag and an optional deadline.

    Deadlines use ``time.monotonic``. A context built with a non-positive timeout
    is expired from the start.
    """

    def __init__(self, timeout: float | None = None):
        self._cancelled = threading.Event()
        self.deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self) -> bool:
        return self.cancelled or self.expired

    def reason(self) -> str | None:
        if self.cancelled:
            return "context canceled"
        if self.expired:
            return "context deadline exceeded"
        return None
