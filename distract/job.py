"""Background jobs that exchange typed messages with the main thread."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

MAX_MESSAGES = 255


class MessageQueueFull(Exception):
    """Raised when a job already holds the maximum number of messages."""


@dataclass(frozen=True)
class _Message:
    type: int
    content: Any


class Job:
    """An action run on its own thread, with a shared message queue."""

    def __init__(self, action: Callable[[Job], None], data: Any = None) -> None:
        self.action = action
        self.data = data
        self._lock = threading.Lock()
        self._messages: list[_Message] = []
        self._in_progress = False
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        with self._lock:
            self._in_progress = True
        try:
            self.action(self)
        finally:
            with self._lock:
                self._in_progress = False

    def start(self) -> None:
        """Launch the action; a run still going is waited for first."""
        self.wait()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def wait(self) -> None:
        """Block until the current run of the action has finished."""
        if self._thread is not None:
            self._thread.join()

    def in_progress(self) -> bool:
        """Whether the action is running right now."""
        with self._lock:
            return self._in_progress

    def send_message(self, type_: int, content: Any) -> None:
        """Queue a message; raise MessageQueueFull when the queue is full."""
        if content is None:
            logger.warning("job message content is None, which is error prone")
        with self._lock:
            if len(self._messages) >= MAX_MESSAGES:
                raise MessageQueueFull(f"job already holds {MAX_MESSAGES} messages")
            self._messages.append(_Message(type_, content))

    def poll_message(self, type_: int) -> Any:
        """Remove and return the oldest message content of a type, or None."""
        with self._lock:
            for position, message in enumerate(self._messages):
                if message.type == type_:
                    del self._messages[position]
                    return message.content
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)