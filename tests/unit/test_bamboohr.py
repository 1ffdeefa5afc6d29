"""
Tests for the BambooHR client facade.

Every typed wrapper is checked against the exact request it must put on the
wire: verb, full URL and body.
"""
import unittest
from unittest.mock import patch

from bamboohr_client import BambooHR, new_bamboohr
from bamboohr_client.client.in_memory_transport import InMemoryTransport
from bamboohr_client.client.remote_transport import RequestsTransport
from bamboohr_client.config.settings import ClientSettings
from bamboohr_client.endpoints import ENDPOINTS
from bamboohr_client.exceptions import BambooHRAPIError, UnknownOperationError

BASE_URL = 'https://api.bamboohr.com/api/gateway.php/ACME/v1'
BODY = {"field": "value"}

# (method, positional args, expected verb, expected path, expected body)
WRAPPER_CASES = [
    ('get_employee', (42,), 'GET', '/employees/42/', None),
    ('update_employee', (42, BODY), 'POST', '/employees/42/', BODY),
    ('add_employee', (BODY,), 'POST', '/employees/', BODY),
    ('get_employee_directory', (), 'GET', '/employees/directory', None),
    ('get_updated_employee_ids', ('2024-01-25',), 'GET', '/employees/changed?since=2024-01-25', None),
    ('list_employee_files_and_categories', (42,), 'GET', '/employees/42/files', None),
    ('add_employee_file_category', (42, BODY), 'POST', '/employees/42/files', BODY),
    ('update_employee_file', (42, 7, BODY), 'POST', '/employees/42/files/7', BODY),
    ('get_employee_file', (42, 7), 'GET', '/employees/42/files/7', None),
    ('delete_employee_file', (42, 7), 'DELETE', '/employees/42/files/7', None),
    ('list_company_files_and_categories', (), 'GET', '/files', None),
    ('add_company_file_category', (BODY,), 'POST', '/files', BODY),
    ('update_company_file', (7, BODY), 'POST', '/files/7', BODY),
    ('delete_company_file', (7,), 'DELETE', '/files/7', None),
    ('get_company_file', (7,), 'GET', '/files/7', None),
    ('upload_company_file', (BODY,), 'POST', '/files', BODY),
    ('get_company_report', (3,), 'GET', '/reports/3', None),
    ('request_custom_report', (3, BODY), 'POST', '/reports/3', BODY),
    ('get_employee_table_rows', (42, 'jobInfo'), 'GET', '/employees/42/tables/jobInfo', None),
    ('add_table_row', (42, 'jobInfo', BODY), 'POST', '/employees/42/tables/jobInfo', BODY),
    ('update_table_row', (42, 'jobInfo', 9, BODY), 'POST', '/employees/42/tables/jobInfo/9', BODY),
    ('delete_table_row', (42, 'jobInfo', 9), 'DELETE', '/employees/42/tables/jobInfo/9', None),
    ('get_all_updated_employee_table_data', (42,), 'GET', '/employees/42/tables', None),
    ('get_list_of_fields', (), 'GET', '/meta/fields', None),
    ('get_list_of_tabular_fields', (), 'GET', '/meta/tables', None),
    ('get_list_field_details', (), 'GET', '/meta/lists', None),
    ('update_values_for_list_field', (5, BODY), 'PUT', '/meta/lists/5', BODY),
    ('get_users', (), 'GET', '/meta/users', None),
    ('get_time_off_types', (), 'GET', '/meta/time_off/types', None),
    ('get_time_off_policies', (), 'GET', '/meta/time_off/policies', None),
    ('get_time_off_requests', (), 'GET', '/meta/time_off/requests', None),
    ('add_time_off_request', (42, BODY), 'PUT', '/meta/employees/42/time_off/requests', BODY),
    ('change_request_status', (11, BODY), 'PUT', '/meta/time_off/requests/11/status', BODY),
    ('add_time_off_history_item', (42, 11, BODY), 'PUT', '/meta/employees/42time_off/requests/11', BODY),
    ('adjust_time_off_balance', (42, BODY), 'PUT',
     '/meta/time_off/employees/42/time_off/balance_adjustment', BODY),
    ('list_time_off_policies_for_employee', (42,), 'GET', '/meta/employees/42/time_off/policies', None),
    ('assign_time_off_policies_for_employee', (42, BODY), 'PUT', '/meta/employees/42/time_off/policies', BODY),
    ('estimate_future_time_off_balance', (42, BODY), 'PUT', '/meta/employees/42/time_off/calculator', BODY),
    ('get_time_off_list', (), 'GET', '/meta/time_off/whos_out', None),
    ('get_employee_photo', (42, 'small'), 'GET', '/employees/42/photo/small', None),
    ('store_employee_photo', (42, BODY), 'POST', '/employees/42/photo', BODY),
    ('user_login', (BODY,), 'POST', '/login', BODY),
    ('get_benefit_deduction_types', (), 'GET', '/benefits/settings/deduction_types/all', None),
    ('get_employee_dependents', (8,), 'GET', '/v1/employeedependents/8', None),
    ('update_employee_dependent', (8, BODY), 'POST', '/v1/employeedependents/8', BODY),
    ('get_all_employee_dependents', (), 'GET', '/v1/employeedependents', None),
    ('add_employee_dependent', (BODY,), 'POST', '/v1/employeedependents', BODY),
]


class TestTypedWrappers(unittest.TestCase):

    def setUp(self):
        self.transport = InMemoryTransport()
        self.bamboo = BambooHR('ACME', 'secret123', transport=self.transport)

    def test_every_operation_has_a_wrapper_case(self):
        self.assertEqual(sorted(case[0] for case in WRAPPER_CASES), sorted(ENDPOINTS))

    def test_every_operation_has_a_wrapper_method(self):
        for name in ENDPOINTS:
            self.assertTrue(callable(getattr(self.bamboo, name, None)), name)

    def test_wrappers_build_documented_requests(self):
        for name, args, verb, path, body in WRAPPER_CASES:
            with self.subTest(operation=name):
                getattr(self.bamboo, name)(*args)

                sent = self.transport.last_request
                self.assertEqual(sent.method, verb)
                self.assertEqual(sent.url, BASE_URL + path)
                self.assertEqual(sent.headers['Authorization'], 'Basic c2VjcmV0MTIzOg==')
                self.assertEqual(sent.headers['Accept'], 'application/json')
                self.assertEqual(sent.json, body)
                if body is None:
                    self.assertNotIn('Content-Type', sent.headers)
                else:
                    self.assertEqual(sent.headers['Content-Type'], 'application/json')

    def test_add_employee_example(self):
        self.bamboo.add_employee({"firstName": "Jane"})

        sent = self.transport.last_request
        self.assertEqual(sent.method, 'POST')
        self.assertEqual(sent.url, f'{BASE_URL}/employees/')
        self.assertEqual(sent.headers['Content-Type'], 'application/json')
        self.assertEqual(sent.body, b'{"firstName":"Jane"}')

    def test_returns_parsed_response(self):
        self.transport.queue_json({"employees": [{"id": "1"}]})
        self.assertEqual(self.bamboo.get_employee_directory(), {"employees": [{"id": "1"}]})

    def test_failure_surfaces_as_api_error(self):
        self.transport.queue_response(404, text='')
        with self.assertRaises(BambooHRAPIError):
            self.bamboo.get_employee(999)


class TestBambooHR(unittest.TestCase):

    def setUp(self):
        self.transport = InMemoryTransport()
        self.bamboo = BambooHR('ACME', 'secret123', transport=self.transport)

    def test_properties(self):
        self.assertEqual(self.bamboo.company_domain, 'ACME')
        self.assertEqual(self.bamboo.base_url, BASE_URL)
        self.assertEqual(self.bamboo.credentials.token, 'c2VjcmV0MTIzOg==')

    def test_repr_hides_key(self):
        self.assertNotIn('secret123', repr(self.bamboo))

    def test_call_by_name(self):
        self.bamboo.call('get_employee_file', employee_id=1, file_id=2)
        self.assertEqual(self.transport.last_request.url, f'{BASE_URL}/employees/1/files/2')

    def test_call_unknown_operation(self):
        with self.assertRaises(UnknownOperationError):
            self.bamboo.call('nope')
        self.assertEqual(self.transport.requests, [])

    def test_raw_request(self):
        self.bamboo.request('/employees/0/?fields=firstName', 'GET')
        self.assertEqual(self.transport.last_request.url, f'{BASE_URL}/employees/0/?fields=firstName')

    def test_from_settings(self):
        settings = ClientSettings(company_domain='globex', api_key='k')
        bamboo = BambooHR.from_settings(settings, transport=self.transport)
        self.assertEqual(bamboo.base_url, 'https://api.bamboohr.com/api/gateway.php/globex/v1')
        self.assertEqual(bamboo.credentials.authorization_header, 'Basic azo=')

    def test_from_settings_loads_when_not_given(self):
        settings = ClientSettings(company_domain='initech', api_key='k')
        with patch('bamboohr_client.bamboohr.load_settings', return_value=settings) as load:
            bamboo = BambooHR.from_settings(config_env='sandbox')
        load.assert_called_once_with('sandbox')
        self.assertEqual(bamboo.company_domain, 'initech')

    def test_new_bamboohr_uses_network_transport(self):
        bamboo = new_bamboohr('ACME', 'secret123')
        self.assertEqual(bamboo.base_url, BASE_URL)

        with patch.object(RequestsTransport, 'request') as request:
            request.return_value.json.return_value = {"id": "42"}
            self.assertEqual(bamboo.get_employee(42), {"id": "42"})

        method, url, headers, body = request.call_args[0]
        self.assertEqual((method, url, body), ('GET', f'{BASE_URL}/employees/42/', None))
        self.assertEqual(headers['Authorization'], 'Basic c2VjcmV0MTIzOg==')


if __name__ == '__main__':
    unittest.main()
