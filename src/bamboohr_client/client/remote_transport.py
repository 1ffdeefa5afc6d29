"""
Remote HTTP transport using requests library.

Each call is an independent round trip; no session, no retries, no timeout.
"""
import logging
from typing import Dict, Optional

import requests

from .base_transport import Transport
from .response import APIResponse

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):
    """Network transport backed by ``requests.request``."""

    def request(self, method, url, headers, body=None):
        response = requests.request(method, url, headers=headers, data=body)
        logger.debug(f"{method} {url} -> {response.status_code}")
        response.raise_for_status()

        return APIResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            url=response.url
        )
