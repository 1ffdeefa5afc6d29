"""
Declarative table of BambooHR endpoints.

Each operation is a (verb, path template, accepts body) triple. Templates
are appended to the tenant base URL exactly as written, including the
irregular ones kept for wire compatibility with the deployed integration:

- the dependents endpoints carry an extra ``/v1`` prefix
- ``add_time_off_history_item`` has no ``/`` between the employee id and ``time_off``
- several estimate/assign/request operations use PUT
"""
import string
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .client.dispatcher import RequestDescriptor
from .exceptions import UnknownOperationError

_formatter = string.Formatter()


@dataclass(frozen=True)
class Endpoint:
    """A named BambooHR operation."""
    name: str
    method: str
    template: str
    accepts_body: bool = False
    description: str = ""

    @property
    def path_params(self) -> Tuple[str, ...]:
        return tuple(field for _, field, _, _ in _formatter.parse(self.template) if field)

    def render(self, /, **params) -> str:
        """Interpolate identifiers into the template, verbatim."""
        expected = set(self.path_params)
        missing = [p for p in self.path_params if params.get(p) is None]
        if missing:
            raise ValueError(f"Missing path parameter(s) for {self.name}: {', '.join(missing)}")
        unexpected = sorted(set(params) - expected)
        if unexpected:
            raise ValueError(f"Unexpected path parameter(s) for {self.name}: {', '.join(unexpected)}")
        return self.template.format(**{k: str(v) for k, v in params.items()})

    def build(self, data: Any = None, /, **params) -> RequestDescriptor:
        if data is not None and not self.accepts_body:
            raise ValueError(f"{self.name} does not accept a request body")
        return RequestDescriptor(method=self.method, path=self.render(**params), body=data)


def _endpoints(*rows) -> Dict[str, Endpoint]:
    return {row[0]: Endpoint(*row) for row in rows}


ENDPOINTS: Dict[str, Endpoint] = _endpoints(
    # Employees
    ('get_employee', 'GET', '/employees/{employee_id}/', False, "Get an employee"),
    ('update_employee', 'POST', '/employees/{employee_id}/', True, "Update an employee"),
    ('add_employee', 'POST', '/employees/', True, "Add an employee"),
    ('get_employee_directory', 'GET', '/employees/directory', False, "Get the employee directory"),
    ('get_updated_employee_ids', 'GET', '/employees/changed?since={since}', False,
     "Get IDs of employees changed since a timestamp"),

    # Employee files
    ('list_employee_files_and_categories', 'GET', '/employees/{employee_id}/files', False,
     "List employee files and categories"),
    ('add_employee_file_category', 'POST', '/employees/{employee_id}/files', True,
     "Add an employee file category"),
    ('update_employee_file', 'POST', '/employees/{employee_id}/files/{file_id}', True,
     "Update an employee file"),
    ('get_employee_file', 'GET', '/employees/{employee_id}/files/{file_id}', False, "Get an employee file"),
    ('delete_employee_file', 'DELETE', '/employees/{employee_id}/files/{file_id}', False,
     "Delete an employee file"),

    # Company files
    ('list_company_files_and_categories', 'GET', '/files', False, "List company files and categories"),
    ('add_company_file_category', 'POST', '/files', True, "Add a company file category"),
    ('update_company_file', 'POST', '/files/{file_id}', True, "Update a company file"),
    ('delete_company_file', 'DELETE', '/files/{file_id}', False, "Delete a company file"),
    ('get_company_file', 'GET', '/files/{file_id}', False, "Get a company file"),
    ('upload_company_file', 'POST', '/files', True, "Upload a company file"),

    # Reports
    ('get_company_report', 'GET', '/reports/{report_id}', False, "Get a company report"),
    ('request_custom_report', 'POST', '/reports/{report_id}', True, "Request a custom report"),

    # Tabular data
    ('get_employee_table_rows', 'GET', '/employees/{employee_id}/tables/{table_id}', False,
     "Get table rows for an employee and table"),
    ('add_table_row', 'POST', '/employees/{employee_id}/tables/{table_id}', True, "Add a table row"),
    ('update_table_row', 'POST', '/employees/{employee_id}/tables/{table_id}/{row_id}', True,
     "Update a table row"),
    ('delete_table_row', 'DELETE', '/employees/{employee_id}/tables/{table_id}/{row_id}', False,
     "Delete a table row"),
    ('get_all_updated_employee_table_data', 'GET', '/employees/{employee_id}/tables', False,
     "Get all updated employee table data"),

    # Metadata
    ('get_list_of_fields', 'GET', '/meta/fields', False, "Get a list of fields"),
    ('get_list_of_tabular_fields', 'GET', '/meta/tables', False, "Get a list of tabular fields"),
    ('get_list_field_details', 'GET', '/meta/lists', False, "Get list field details"),
    ('update_values_for_list_field', 'PUT', '/meta/lists/{list_field_id}', True,
     "Update values for a list field"),
    ('get_users', 'GET', '/meta/users', False, "Get users"),

    # Time off
    ('get_time_off_types', 'GET', '/meta/time_off/types', False, "Get time off types"),
    ('get_time_off_policies', 'GET', '/meta/time_off/policies', False, "Get time off policies"),
    ('get_time_off_requests', 'GET', '/meta/time_off/requests', False, "Get time off requests"),
    ('add_time_off_request', 'PUT', '/meta/employees/{employee_id}/time_off/requests', True,
     "Add a time off request"),
    ('change_request_status', 'PUT', '/meta/time_off/requests/{request_id}/status', True,
     "Change a time off request status"),
    ('add_time_off_history_item', 'PUT', '/meta/employees/{employee_id}time_off/requests/{request_id}', True,
     "Add a time off history item"),
    ('adjust_time_off_balance', 'PUT',
     '/meta/time_off/employees/{employee_id}/time_off/balance_adjustment', True,
     "Adjust a time off balance"),
    ('list_time_off_policies_for_employee', 'GET', '/meta/employees/{employee_id}/time_off/policies', False,
     "List time off policies for an employee"),
    ('assign_time_off_policies_for_employee', 'PUT', '/meta/employees/{employee_id}/time_off/policies', True,
     "Assign time off policies to an employee"),
    ('estimate_future_time_off_balance', 'PUT', '/meta/employees/{employee_id}/time_off/calculator', True,
     "Estimate a future time off balance"),
    ('get_time_off_list', 'GET', '/meta/time_off/whos_out', False, "Get who's out"),

    # Photos
    ('get_employee_photo', 'GET', '/employees/{employee_id}/photo/{size}', False, "Get an employee photo"),
    ('store_employee_photo', 'POST', '/employees/{employee_id}/photo', True, "Store an employee photo"),

    # Login
    ('user_login', 'POST', '/login', True, "User login"),

    # Benefits
    ('get_benefit_deduction_types', 'GET', '/benefits/settings/deduction_types/all', False,
     "Get benefit deduction types"),

    # Dependents
    ('get_employee_dependents', 'GET', '/v1/employeedependents/{dependent_id}', False,
     "Get an employee dependent"),
    ('update_employee_dependent', 'POST', '/v1/employeedependents/{dependent_id}', True,
     "Update an employee dependent"),
    ('get_all_employee_dependents', 'GET', '/v1/employeedependents', False, "Get all employee dependents"),
    ('add_employee_dependent', 'POST', '/v1/employeedependents', True, "Add an employee dependent"),
)


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownOperationError(name) from None
