"""
BambooHR REST API client.

A thin binding from named operations to BambooHR's v1 REST endpoints.
"""

from .bamboohr import BambooHR, new_bamboohr
from .client import Credentials, InMemoryTransport, RequestsTransport, Transport, api_request
from .endpoints import ENDPOINTS, Endpoint, get_endpoint
from .exceptions import BambooHRAPIError, ConfigException, MissingSettingException, UnknownOperationError

__version__ = '0.1.0'

__all__ = [
    'BambooHR',
    'BambooHRAPIError',
    'ConfigException',
    'Credentials',
    'ENDPOINTS',
    'Endpoint',
    'InMemoryTransport',
    'MissingSettingException',
    'RequestsTransport',
    'Transport',
    'UnknownOperationError',
    'api_request',
    'get_endpoint',
    'new_bamboohr',
]
