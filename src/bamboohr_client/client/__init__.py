"""
Credential holder, request dispatcher and transports.
"""

from .base_transport import Transport
from .credentials import Credentials, basic_token, build_base_url
from .dispatcher import RequestDescriptor, api_request, build_headers, dispatch, serialize_body
from .in_memory_transport import InMemoryTransport, RecordedRequest
from .remote_transport import RequestsTransport
from .response import APIResponse

__all__ = [
    'APIResponse',
    'Credentials',
    'InMemoryTransport',
    'RecordedRequest',
    'RequestDescriptor',
    'RequestsTransport',
    'Transport',
    'api_request',
    'basic_token',
    'build_base_url',
    'build_headers',
    'dispatch',
    'serialize_body',
]
