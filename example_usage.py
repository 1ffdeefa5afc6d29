#!/usr/bin/env python3
"""
Example usage of the BambooHR client.

Runs offline against an InMemoryTransport by default. Set
BAMBOOHR_COMPANY_DOMAIN and BAMBOOHR_API_KEY and pass --live to hit the
real API instead.
"""

import json
import sys

from bamboohr_client import BambooHR, BambooHRAPIError, InMemoryTransport
from bamboohr_client.config import get_logger

logger = get_logger(__name__)


def offline_demo():
    """Show exactly what the client puts on the wire."""
    transport = InMemoryTransport()
    transport.queue_json({"id": "42", "firstName": "Jane", "lastName": "Doe"})

    bamboo = BambooHR('ACME', 'secret123', transport=transport)
    employee = bamboo.get_employee(42)

    sent = transport.last_request
    print(f"📤 {sent.method} {sent.url}")
    print(f"   Authorization: {sent.headers['Authorization']}")
    print(f"📥 {json.dumps(employee)}")

    bamboo.add_employee({"firstName": "Jane"})
    sent = transport.last_request
    print(f"📤 {sent.method} {sent.url}")
    print(f"   Body: {sent.body.decode('utf-8')}")


def live_demo():
    bamboo = BambooHR.from_settings()
    try:
        directory = bamboo.get_employee_directory()
    except BambooHRAPIError as e:
        logger.error(f"Directory lookup failed: {e}")
        return 1
    print(f"✅ {len(directory.get('employees', []))} employees in {bamboo.company_domain}")
    return 0


def main():
    if '--live' in sys.argv[1:]:
        return live_demo()
    offline_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
