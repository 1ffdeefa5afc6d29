"""
Endpoint tasks - list the operation table and call operations from the shell.
"""

import json
import logging
import sys
from pathlib import Path

import yaml
from invoke import task

from ..endpoints import ENDPOINTS, get_endpoint
from ..exceptions import BambooHRAPIError, UnknownOperationError
from .decorators import client_for, debug_logging

logger = logging.getLogger(__name__)


def parse_params(pairs):
    """Turn ``['employee_id=42', ...]`` into a dict."""
    params = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Invalid --param '{pair}', expected name=value")
        name, value = pair.split('=', 1)
        params[name.strip()] = value
    return params


def parse_data(data):
    """Parse a JSON payload given inline or as ``@path/to/file.json``."""
    if data is None:
        return None
    if data.startswith('@'):
        data = Path(data[1:]).read_text(encoding='utf-8')
    return json.loads(data)


def render(result, output_format='json'):
    if output_format == 'yaml':
        return yaml.safe_dump(result, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(result, indent=2, ensure_ascii=False)


@task(help={'verb': 'Only show operations using this HTTP verb (GET, POST, PUT, DELETE)'})
def operations(ctx, verb=None):
    """List every BambooHR operation with its verb and path template."""
    width = max(len(name) for name in ENDPOINTS)
    for name, endpoint in ENDPOINTS.items():
        if verb and endpoint.method != verb.upper():
            continue
        body = ' (body)' if endpoint.accepts_body else ''
        print(f"{name:<{width}}  {endpoint.method:<6} {endpoint.template}{body}")


@task(iterable=['param'], help={
    'operation': 'Operation name, see `bamboohr operations`',
    'param': 'Path parameter as name=value (repeatable)',
    'data': 'JSON payload, inline or @file.json',
    'config_env': 'Profile in config/bamboohr.yaml (defaults to top-level settings)',
    'output_format': 'Output format: json or yaml',
    'debug': 'Enable debug logging (sets LOG_LEVEL=DEBUG)'
})
@debug_logging
def call(ctx, operation, param=None, data=None, config_env=None, output_format='json', debug=False):
    """
    Call a BambooHR operation and print the JSON response.

    Examples:
        bamboohr call get-employee --param employee_id=42
        bamboohr call add-employee --data '{"firstName": "Jane", "lastName": "Doe"}'
        bamboohr call update-employee --param employee_id=42 --data @employee.json --config-env=sandbox
    """
    operation = operation.replace('-', '_')
    try:
        get_endpoint(operation)
        params = parse_params(param)
        payload = parse_data(data)
    except (UnknownOperationError, ValueError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)

    client = client_for(config_env)
    logger.debug(f"Calling {operation} with params {params}")

    try:
        result = client.call(operation, payload, **params)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)
    except BambooHRAPIError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    print(render(result, output_format))
