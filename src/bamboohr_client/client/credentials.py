"""
Per-tenant credential holder.

The Basic token and the tenant-scoped base URL are derived once at
construction and never change afterwards.
"""
import base64
from dataclasses import dataclass, field

API_HOST = "https://api.bamboohr.com"
GATEWAY_PATH = "/api/gateway.php/{company_domain}/v1"


def basic_token(api_key: str) -> str:
    """Encode ``<api_key>:`` (empty password) for HTTP Basic auth."""
    return base64.b64encode(f"{api_key}:".encode("utf-8")).decode("ascii")


def build_base_url(company_domain: str) -> str:
    return API_HOST + GATEWAY_PATH.format(company_domain=company_domain)


@dataclass(frozen=True)
class Credentials:
    """Immutable tenant configuration shared by every request.

    Nothing is validated locally; a bad key only shows up as a failed request.
    """
    company_domain: str
    api_key: str = field(repr=False)
    token: str = field(repr=False)
    base_url: str

    @classmethod
    def create(cls, company_domain: str, api_key: str) -> 'Credentials':
        return cls(
            company_domain=company_domain,
            api_key=api_key,
            token=basic_token(api_key),
            base_url=build_base_url(company_domain),
        )

    @property
    def authorization_header(self) -> str:
        return f"Basic {self.token}"
