"""
BambooHR REST API client.

Usage:
    bamboo = new_bamboohr('ACME', api_key)
    employee = bamboo.get_employee(42)

Every method below is a named view onto one row of ``ENDPOINTS``; the
request itself is built from the table and sent by ``api_request``.
"""
from typing import Any, Optional

from .client.base_transport import Transport
from .client.credentials import Credentials
from .client.dispatcher import api_request, dispatch
from .config.settings import ClientSettings, load_settings
from .endpoints import get_endpoint

JSON = Any


class BambooHR:
    """Client bound to one company domain and API key."""

    def __init__(self, company_domain: str, api_key: str, transport: Optional[Transport] = None):
        self._credentials = Credentials.create(company_domain, api_key)
        self._transport = transport

    def __repr__(self):
        return f"BambooHR(company_domain={self.company_domain!r})"

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None, config_env: Optional[str] = None,
                      transport: Optional[Transport] = None) -> 'BambooHR':
        """Build a client from ``ClientSettings``, loading them if not given."""
        if settings is None:
            settings = load_settings(config_env)
        return cls(settings.company_domain, settings.api_key.get_secret_value(), transport=transport)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def company_domain(self) -> str:
        return self._credentials.company_domain

    @property
    def base_url(self) -> str:
        return self._credentials.base_url

    def request(self, endpoint: str, method: str, data: JSON = None) -> JSON:
        """Send a raw request to ``base_url + endpoint``."""
        return api_request(self._credentials, endpoint, method, data, transport=self._transport)

    def call(self, operation: str, data: JSON = None, /, **params) -> JSON:
        """Call a table operation by name, e.g. ``call('get_employee', employee_id=42)``."""
        descriptor = get_endpoint(operation).build(data, **params)
        return dispatch(self._credentials, descriptor, transport=self._transport)

    # Employees

    def get_employee(self, employee_id) -> JSON:
        return self.call('get_employee', employee_id=employee_id)

    def update_employee(self, employee_id, data: JSON) -> JSON:
        return self.call('update_employee', data, employee_id=employee_id)

    def add_employee(self, data: JSON) -> JSON:
        return self.call('add_employee', data)

    def get_employee_directory(self) -> JSON:
        return self.call('get_employee_directory')

    def get_updated_employee_ids(self, since: str) -> JSON:
        """IDs of employees changed since ``since`` (ISO 8601), passed through as-is."""
        return self.call('get_updated_employee_ids', since=since)

    # Employee files

    def list_employee_files_and_categories(self, employee_id) -> JSON:
        return self.call('list_employee_files_and_categories', employee_id=employee_id)

    def add_employee_file_category(self, employee_id, data: JSON) -> JSON:
        return self.call('add_employee_file_category', data, employee_id=employee_id)

    def update_employee_file(self, employee_id, file_id, data: JSON) -> JSON:
        return self.call('update_employee_file', data, employee_id=employee_id, file_id=file_id)

    def get_employee_file(self, employee_id, file_id) -> JSON:
        return self.call('get_employee_file', employee_id=employee_id, file_id=file_id)

    def delete_employee_file(self, employee_id, file_id) -> JSON:
        return self.call('delete_employee_file', employee_id=employee_id, file_id=file_id)

    # Company files

    def list_company_files_and_categories(self) -> JSON:
        return self.call('list_company_files_and_categories')

    def add_company_file_category(self, data: JSON) -> JSON:
        return self.call('add_company_file_category', data)

    def update_company_file(self, file_id, data: JSON) -> JSON:
        return self.call('update_company_file', data, file_id=file_id)

    def delete_company_file(self, file_id) -> JSON:
        return self.call('delete_company_file', file_id=file_id)

    def get_company_file(self, file_id) -> JSON:
        return self.call('get_company_file', file_id=file_id)

    def upload_company_file(self, data: JSON) -> JSON:
        return self.call('upload_company_file', data)

    # Reports

    def get_company_report(self, report_id) -> JSON:
        return self.call('get_company_report', report_id=report_id)

    def request_custom_report(self, report_id, data: JSON) -> JSON:
        return self.call('request_custom_report', data, report_id=report_id)

    # Tabular data

    def get_employee_table_rows(self, employee_id, table_id) -> JSON:
        return self.call('get_employee_table_rows', employee_id=employee_id, table_id=table_id)

    def add_table_row(self, employee_id, table_id, data: JSON) -> JSON:
        return self.call('add_table_row', data, employee_id=employee_id, table_id=table_id)

    def update_table_row(self, employee_id, table_id, row_id, data: JSON) -> JSON:
        return self.call('update_table_row', data, employee_id=employee_id, table_id=table_id, row_id=row_id)

    def delete_table_row(self, employee_id, table_id, row_id) -> JSON:
        return self.call('delete_table_row', employee_id=employee_id, table_id=table_id, row_id=row_id)

    def get_all_updated_employee_table_data(self, employee_id) -> JSON:
        return self.call('get_all_updated_employee_table_data', employee_id=employee_id)

    # Metadata

    def get_list_of_fields(self) -> JSON:
        return self.call('get_list_of_fields')

    def get_list_of_tabular_fields(self) -> JSON:
        return self.call('get_list_of_tabular_fields')

    def get_list_field_details(self) -> JSON:
        return self.call('get_list_field_details')

    def update_values_for_list_field(self, list_field_id, data: JSON) -> JSON:
        return self.call('update_values_for_list_field', data, list_field_id=list_field_id)

    def get_users(self) -> JSON:
        return self.call('get_users')

    # Time off

    def get_time_off_types(self) -> JSON:
        return self.call('get_time_off_types')

    def get_time_off_policies(self) -> JSON:
        return self.call('get_time_off_policies')

    def get_time_off_requests(self) -> JSON:
        return self.call('get_time_off_requests')

    def add_time_off_request(self, employee_id, data: JSON) -> JSON:
        return self.call('add_time_off_request', data, employee_id=employee_id)

    def change_request_status(self, request_id, data: JSON) -> JSON:
        return self.call('change_request_status', data, request_id=request_id)

    def add_time_off_history_item(self, employee_id, request_id, data: JSON) -> JSON:
        return self.call('add_time_off_history_item', data, employee_id=employee_id, request_id=request_id)

    def adjust_time_off_balance(self, employee_id, data: JSON) -> JSON:
        return self.call('adjust_time_off_balance', data, employee_id=employee_id)

    def list_time_off_policies_for_employee(self, employee_id) -> JSON:
        return self.call('list_time_off_policies_for_employee', employee_id=employee_id)

    def assign_time_off_policies_for_employee(self, employee_id, data: JSON) -> JSON:
        return self.call('assign_time_off_policies_for_employee', data, employee_id=employee_id)

    def estimate_future_time_off_balance(self, employee_id, data: JSON) -> JSON:
        return self.call('estimate_future_time_off_balance', data, employee_id=employee_id)

    def get_time_off_list(self) -> JSON:
        return self.call('get_time_off_list')

    # Photos

    def get_employee_photo(self, employee_id, size) -> JSON:
        return self.call('get_employee_photo', employee_id=employee_id, size=size)

    def store_employee_photo(self, employee_id, data: JSON) -> JSON:
        return self.call('store_employee_photo', data, employee_id=employee_id)

    # Login

    def user_login(self, data: JSON) -> JSON:
        return self.call('user_login', data)

    # Benefits

    def get_benefit_deduction_types(self) -> JSON:
        return self.call('get_benefit_deduction_types')

    # Dependents

    def get_employee_dependents(self, dependent_id) -> JSON:
        return self.call('get_employee_dependents', dependent_id=dependent_id)

    def update_employee_dependent(self, dependent_id, data: JSON) -> JSON:
        return self.call('update_employee_dependent', data, dependent_id=dependent_id)

    def get_all_employee_dependents(self) -> JSON:
        return self.call('get_all_employee_dependents')

    def add_employee_dependent(self, data: JSON) -> JSON:
        return self.call('add_employee_dependent', data)


def new_bamboohr(company_domain: str, api_key: str) -> BambooHR:
    """Construct a client for ``company_domain`` (e.g. 'ACME')."""
    return BambooHR(company_domain, api_key)
