import threading


class RequestCounter:
    """Process-lifetime request counter shared by every worker thread."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("start must be >= 0")
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
