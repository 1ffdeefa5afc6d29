"""
Authenticated request dispatch.

Every BambooHR operation funnels through ``api_request``: it joins the
tenant base URL with an endpoint suffix, attaches the Basic credential,
serializes the JSON payload and parses the JSON reply.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import BambooHRAPIError
from .base_transport import Transport
from .credentials import Credentials
from .remote_transport import RequestsTransport

logger = logging.getLogger(__name__)

METHODS = ('GET', 'POST', 'PUT', 'DELETE')


@dataclass(frozen=True)
class RequestDescriptor:
    """Verb, endpoint suffix and optional body for a single call."""
    method: str
    path: str
    body: Any = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


def build_headers(credentials: Credentials, has_body: bool) -> Dict[str, str]:
    headers = {
        'Authorization': credentials.authorization_header,
        'Accept': 'application/json',
    }
    if has_body:
        headers['Content-Type'] = 'application/json'
    return headers


def serialize_body(body: Any) -> Optional[bytes]:
    """Compact JSON text as UTF-8, or ``None`` when there is no body."""
    if body is None:
        return None
    return json.dumps(body, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


def api_request(credentials: Credentials, endpoint: str, method: str,
                data: Any = None, transport: Optional[Transport] = None) -> Any:
    """Make an authenticated request to BambooHR and return the parsed JSON.

    Args:
        credentials: Tenant credentials built by ``Credentials.create``
        endpoint: Path suffix, appended verbatim to the base URL
        method: One of GET, POST, PUT, DELETE
        data: Optional JSON-serializable payload
        transport: Fetch primitive, defaults to ``RequestsTransport``

    Returns:
        The decoded JSON body

    Raises:
        BambooHRAPIError: For any failure while sending or decoding
    """
    method = method.upper()
    if method not in METHODS:
        raise ValueError(f"Unsupported HTTP method '{method}'. Expected one of: {', '.join(METHODS)}")

    url = credentials.base_url + endpoint
    # any non-None value is a body, falsy ones included
    headers = build_headers(credentials, has_body=data is not None)
    transport = transport or RequestsTransport()

    logger.debug(f"BambooHR request: {method} {url}")
    try:
        body = serialize_body(data)
        response = transport.request(method, url, headers, body)
        return response.json()
    except Exception as e:
        logger.warning(f"BambooHR request failed: {method} {url}: {e}")
        raise BambooHRAPIError(e) from e


def dispatch(credentials: Credentials, descriptor: RequestDescriptor,
             transport: Optional[Transport] = None) -> Any:
    """Send a prepared ``RequestDescriptor``."""
    return api_request(credentials, descriptor.path, descriptor.method,
                       descriptor.body, transport=transport)
