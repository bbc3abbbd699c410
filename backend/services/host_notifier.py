"""
Outbound notifications from the game to the hosting page.

Each message is a dict tagged with "gameMessage": True so the host can
tell it apart from unrelated cross-frame traffic. Messages are kept in
an outbox the host drains, and are optionally POSTed to a URL by a
background worker so a slow host never holds up a tick.
"""

import os
import logging
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class HostNotifier:
    """
    Collects game -> host messages.

    Args:
        webhook_url: Where to forward messages (defaults to HOST_NOTIFY_URL env var)
        timeout: Forwarding request timeout in seconds
    """

    def __init__(self, webhook_url: Optional[str] = None, timeout: int = 2):
        self.webhook_url = webhook_url or os.getenv('HOST_NOTIFY_URL')
        self.timeout = timeout
        # deque append/popleft are thread-safe; the HTTP thread drains it
        self._outbox = deque()
        self._executor: Optional[ThreadPoolExecutor] = None

    def post_message(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        message = {'gameMessage': True, **payload}
        self._outbox.append(message)

        if self.webhook_url:
            self._forward(message)

        return message

    def notify_ready(self) -> Dict[str, Any]:
        return self.post_message({'gameReady': True})

    def notify_start(self) -> Dict[str, Any]:
        return self.post_message({'gameStart': True})

    def notify_score(self, score: int) -> Dict[str, Any]:
        return self.post_message({'score': score})

    def drain(self) -> List[Dict[str, Any]]:
        """Remove and return all pending messages, oldest first."""
        messages = []
        while True:
            try:
                messages.append(self._outbox.popleft())
            except IndexError:
                return messages

    def pending(self) -> List[Dict[str, Any]]:
        return list(self._outbox)

    def close(self):
        """Wait for queued deliveries to finish."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _forward(self, message: Dict[str, Any]) -> Future:
        # One worker keeps deliveries in the order the messages were posted
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="host-notify")
        return self._executor.submit(self._deliver, message)

    def _deliver(self, message: Dict[str, Any]) -> bool:
        """POST one message to the host URL; False (and a log line) on failure."""
        try:
            response = requests.post(self.webhook_url, json=message, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Host notification to {self.webhook_url} failed: {e}")
            return False

        logger.debug(f"Delivered {message} to {self.webhook_url}")
        return True
