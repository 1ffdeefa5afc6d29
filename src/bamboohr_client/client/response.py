"""
Raw HTTP response wrapper shared by all transports.

Provides a consistent interface regardless of underlying HTTP library.
"""
import json as jsonlib
from dataclasses import dataclass, field
from typing import Any, Dict

import requests


@dataclass
class APIResponse:
    """Status, body text and headers of one HTTP exchange."""
    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self):
        """Raise ``requests.HTTPError`` for anything outside 2xx."""
        if not self.ok:
            raise requests.HTTPError(
                f"{self.status_code} Error for url: {self.url}: {self.text[:200]}"
            )

    def json(self) -> Any:
        """Parse the body as JSON. An empty body is not JSON and raises."""
        return jsonlib.loads(self.text)
