"""Authentication tasks - prints the Basic credential for the configured tenant."""

import sys

from invoke import task

from .decorators import client_for, debug_logging


@task(help={
    'config_env': 'Profile in config/bamboohr.yaml (defaults to top-level settings)',
    'quiet': 'Suppress metadata output to stderr (header always goes to stdout)',
    'debug': 'Enable debug logging (sets LOG_LEVEL=DEBUG)'
})
@debug_logging
def auth_header(ctx, config_env=None, quiet=False, debug=False):
    """
    Print the Authorization header value for the configured API key.

    Examples:
        bamboohr auth-header
        curl -H "Authorization: $(bamboohr auth-header --quiet)" https://api.bamboohr.com/...
    """
    client = client_for(config_env)

    print(client.credentials.authorization_header)

    if not quiet:
        print(f"   Company domain: {client.company_domain}", file=sys.stderr)
        print(f"   Base URL: {client.base_url}", file=sys.stderr)
