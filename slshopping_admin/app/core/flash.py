"""
One-shot flash messages carried across a redirect.

A redirect stores its messages in a process-local ``FlashStore`` under a
random token and hands the token to the browser in the ``flash``
cookie.  The next rendered page pops the messages for that token, so a
message is shown exactly once and nothing is kept in a session.

Entries that are never popped (the client did not follow the redirect,
or the next page failed) expire after ``FLASH_TTL_SECONDS``, and the
store never holds more than ``FLASH_MAX_ENTRIES`` tokens.  A redirect
also drops the token the request itself still carries.
"""

import secrets
import threading
import time
from collections import OrderedDict
from typing import Dict, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import RedirectResponse, Response

FLASH_COOKIE = "flash"
FLASH_TTL_SECONDS = 300
FLASH_MAX_ENTRIES = 1024


class FlashStore:
    """Thread-safe, bounded mapping of flash tokens to pending messages."""

    def __init__(self, ttl: float = FLASH_TTL_SECONDS, max_entries: int = FLASH_MAX_ENTRIES) -> None:
        self.ttl = ttl
        self.max_entries = max_entries
        # Insertion order is expiry order, the TTL being fixed.
        self._messages: "OrderedDict[str, Tuple[float, Dict[str, str]]]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def put(self, messages: Dict[str, str], replaces: Optional[str] = None) -> str:
        """Store ``messages`` under a new token, forgetting ``replaces``."""
        token = secrets.token_urlsafe(16)
        now = time.monotonic()
        with self._lock:
            if replaces:
                self._messages.pop(replaces, None)
            self._prune(now)
            self._messages[token] = (now + self.ttl, dict(messages))
            while len(self._messages) > self.max_entries:
                self._messages.popitem(last=False)
        return token

    def peek(self, token: str) -> Dict[str, str]:
        with self._lock:
            entry = self._messages.get(token)
            if entry is None or entry[0] <= time.monotonic():
                return {}
            return dict(entry[1])

    def pop(self, token: str) -> Dict[str, str]:
        with self._lock:
            entry = self._messages.pop(token, None)
        if entry is None or entry[0] <= time.monotonic():
            return {}
        return entry[1]

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def _prune(self, now: float) -> None:
        while self._messages:
            expires_at, _ = next(iter(self._messages.values()))
            if expires_at > now:
                break
            self._messages.popitem(last=False)


flash_store = FlashStore()


def redirect_with_flash(request: Request, url: str, **messages: str) -> RedirectResponse:
    """Redirect to ``url`` (302) carrying ``messages`` to the next page.

    Messages still pending under the request's own ``flash`` cookie are
    discarded, since the new cookie replaces it.
    """
    response = RedirectResponse(url, status_code=status.HTTP_302_FOUND)
    token = flash_store.put(messages, replaces=request.cookies.get(FLASH_COOKIE))
    response.set_cookie(FLASH_COOKIE, token, httponly=True, samesite="lax")
    return response


def pop_flash(request: Request) -> Dict[str, str]:
    """Return and forget the messages addressed to this request."""
    token: Optional[str] = request.cookies.get(FLASH_COOKIE)
    if not token:
        return {}
    return flash_store.pop(token)


def discard_flash_cookie(request: Request, response: Response) -> None:
    if FLASH_COOKIE in request.cookies:
        response.delete_cookie(FLASH_COOKIE)
