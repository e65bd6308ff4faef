from django.test import SimpleTestCase
from rest_framework import exceptions, status

from ..exceptions import api_exception_handler, flatten_validation_errors


class FlattenValidationErrorsTests(SimpleTestCase):

    def test_field_and_non_field_errors(self):
        detail = {
            "status": ["Status is required"],
            "non_field_errors": ["User already exists"],
        }
        self.assertEqual(flatten_validation_errors(detail), [
            {"param": "status", "msg": "Status is required"},
            {"msg": "User already exists"},
        ])

    def test_nested_errors_use_dotted_params(self):
        detail = {"experience": [{"title": ["Title is required"]}]}
        self.assertEqual(
            flatten_validation_errors(detail),
            [{"param": "experience.title", "msg": "Title is required"}],
        )

    def test_plain_list(self):
        self.assertEqual(flatten_validation_errors(["one", "two"]), [{"msg": "one"}, {"msg": "two"}])


class ApiExceptionHandlerTests(SimpleTestCase):

    def test_validation_error_becomes_errors_list(self):
        exc = exceptions.ValidationError({"skills": ["Skills is required"]})
        response = api_exception_handler(exc, {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"errors": [{"param": "skills", "msg": "Skills is required"}]})

    def test_not_found_becomes_msg(self):
        response = api_exception_handler(exceptions.NotFound("Profile not found"), {})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"msg": "Profile not found"})

    def test_authentication_failure_keeps_status(self):
        response = api_exception_handler(exceptions.NotAuthenticated(), {})
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("msg", response.data)

    def test_unhandled_error_is_logged_and_hidden(self):
        with self.assertLogs('apps.core.exceptions', level='ERROR') as logs:
            response = api_exception_handler(RuntimeError("database exploded"), {'view': None})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.content, b"Server Error")
        self.assertEqual(response['Content-Type'], 'text/plain')
        self.assertIn("database exploded", logs.output[0])
