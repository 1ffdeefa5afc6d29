"""
In-memory transport that records requests and replays canned responses.

Used by the test suite (and by library users in their own tests) to check
exactly what goes over the wire without touching the network.
"""
import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, Union

from .base_transport import Transport
from .response import APIResponse


@dataclass
class RecordedRequest:
    """One request as the transport received it."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[bytes] = None

    @property
    def json(self) -> Any:
        if self.body is None:
            return None
        return json.loads(self.body.decode("utf-8"))


class InMemoryTransport(Transport):
    """Records every request and answers from a FIFO of queued replies.

    With nothing queued it answers ``200 {}``. Queued exceptions are raised
    instead of answering, which simulates a network failure.
    """

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._replies: Deque[Union[APIResponse, BaseException]] = deque()

    def queue_response(self, status_code: int = 200, text: str = "", headers: Dict[str, str] = None):
        self._replies.append(APIResponse(status_code=status_code, text=text, headers=headers or {}))
        return self

    def queue_json(self, payload: Any, status_code: int = 200):
        return self.queue_response(
            status_code=status_code,
            text=json.dumps(payload),
            headers={'Content-Type': 'application/json'}
        )

    def queue_error(self, error: BaseException):
        self._replies.append(error)
        return self

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    def request(self, method, url, headers, body=None):
        self.requests.append(RecordedRequest(method=method, url=url, headers=dict(headers), body=body))

        if not self._replies:
            return APIResponse(status_code=200, text="{}", url=url)

        reply = self._replies.popleft()
        if isinstance(reply, BaseException):
            raise reply

        reply.url = url
        reply.raise_for_status()
        return reply
