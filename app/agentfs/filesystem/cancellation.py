"""Cooperative cancellation token.

A token is a shared flag that moves once from "not requested" to
"requested". Long-running operations poll it at safe points; nothing is
interrupted pre-emptively.
"""

import threading
import time


class CancellationToken:
    """Thread-safe, one-way cancellation flag with an optional deadline.

    Attributes:
        _event: Underlying event, set once cancellation is requested.
        _deadline: Monotonic time after which the token counts as cancelled.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize the token.

        Args:
            timeout: Seconds after which cancellation is requested
                automatically. None means no deadline.

        Raises:
            ValueError: If timeout is negative.
        """
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)
        self._event = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    @property
    def is_cancelled(self) -> bool:
        """Check whether cancellation has been requested."""
        if (
            not self._event.is_set()
            and self._deadline is not None
            and time.monotonic() >= self._deadline
        ):
            self._event.set()
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Calling it more than once has no further effect."""
        self._event.set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"
