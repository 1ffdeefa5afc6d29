"""
Task helpers for logging setup and client construction.
"""
import functools
import os
import sys
from typing import Optional

from pydantic import ValidationError

from ..bamboohr import BambooHR
from ..config.logging import bootstrap_logging
from ..config.settings import load_settings
from ..exceptions import ConfigException


def debug_logging(func):
    """Decorator that bootstraps logging, honouring a task's --debug flag."""
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        if kwargs.get('debug'):
            os.environ['LOG_LEVEL'] = 'DEBUG'
        bootstrap_logging(func.__module__)
        return func(ctx, *args, **kwargs)
    return wrapper


def client_for(config_env: Optional[str] = None) -> BambooHR:
    """Build a client from settings, exiting with guidance if they are incomplete."""
    try:
        return BambooHR.from_settings(load_settings(config_env))
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"❌ Invalid BambooHR settings: {e}", file=sys.stderr)
        sys.exit(1)
