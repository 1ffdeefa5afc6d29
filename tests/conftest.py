"""
Root pytest configuration for bamboohr-client.

Fixtures (bamboohr_client, bamboohr_transport, clean_bamboohr_env) come from
the package's pytest plugin, registered through the pytest11 entry point.
"""

from bamboohr_client.config.logging import bootstrap_logging

bootstrap_logging()
