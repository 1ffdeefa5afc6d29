"""
Base transport abstract class.

A transport is the fetch primitive the dispatcher sends requests through.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .response import APIResponse


class Transport(ABC):
    """Abstract base class for HTTP transports.

    Implementations must raise for non-2xx responses, the way the network
    transport does, so the dispatcher sees every failure as an exception.
    """

    @abstractmethod
    def request(self, method: str, url: str, headers: Dict[str, str],
                body: Optional[bytes] = None) -> APIResponse:
        """Send one request and return the raw response."""
        pass
