import os
import unittest
from unittest.mock import Mock, patch

import requests

from uk_covid19.client import ApiConfig, RequestsTransport, decode_response
from uk_covid19.errors import DecodeError, ErrorCategory, TransportError
from uk_covid19.url import ENDPOINT


class TestApiConfig(unittest.TestCase):
    def test_defaults(self):
        config = ApiConfig()
        self.assertEqual(config.base_url, ENDPOINT)
        self.assertEqual(config.request_timeout, 30)
        self.assertTrue(config.user_agent.startswith("uk-covid19-client/"))

    def test_from_env_overrides(self):
        env = {"UK_COVID19_API_URL": "http://localhost/v1/data", "UK_COVID19_REQUEST_TIMEOUT": "5.5"}
        with patch.dict(os.environ, env, clear=True):
            config = ApiConfig.from_env()

        self.assertEqual(config.base_url, "http://localhost/v1/data")
        self.assertEqual(config.request_timeout, 5.5)

    def test_from_env_without_variables_keeps_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(ApiConfig.from_env(), ApiConfig())

    def test_from_env_rejects_bad_timeout(self):
        with patch.dict(os.environ, {"UK_COVID19_REQUEST_TIMEOUT": "soon"}, clear=True):
            with self.assertRaises(ValueError):
                ApiConfig.from_env()


class TestRequestsTransport(unittest.TestCase):
    def setUp(self):
        self.transport = RequestsTransport(ApiConfig(request_timeout=7))

    def test_get_returns_raw_body(self):
        response = Mock(status_code=200, content=b'{"data": []}')
        with patch("uk_covid19.client.requests.get", return_value=response) as mock_get:
            body = self.transport.get("http://example/data")

        self.assertEqual(body, b'{"data": []}')
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "http://example/data")
        self.assertEqual(kwargs["timeout"], 7)
        self.assertIn("User-Agent", kwargs["headers"])

    def test_connection_error_becomes_transport_error(self):
        failure = requests.exceptions.ConnectionError("name resolution failed")
        with patch("uk_covid19.client.requests.get", side_effect=failure) as mock_get:
            with self.assertRaises(TransportError) as ctx:
                self.transport.get("http://example/data")

        self.assertIs(ctx.exception.original_exception, failure)
        self.assertIs(ctx.exception.__cause__, failure)
        self.assertEqual(ctx.exception.category, ErrorCategory.TRANSPORT)
        self.assertIsNone(ctx.exception.status_code)
        mock_get.assert_called_once()

    def test_timeout_becomes_transport_error(self):
        with patch("uk_covid19.client.requests.get", side_effect=requests.exceptions.Timeout("slow")):
            with self.assertRaises(TransportError) as ctx:
                self.transport.get("http://example/data")
        self.assertIn("timed out", ctx.exception.message)

    def test_error_status_becomes_transport_error(self):
        response = Mock(status_code=404, text="Not Found", content=b"Not Found")
        with patch("uk_covid19.client.requests.get", return_value=response):
            with self.assertRaises(TransportError) as ctx:
                self.transport.get("http://example/data")

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertIn("404", str(ctx.exception))


class TestDecodeResponse(unittest.TestCase):
    def test_valid_json(self):
        self.assertEqual(decode_response(b'{"length": 0, "data": []}'), {"length": 0, "data": []})
        self.assertEqual(decode_response(b"[1, 2]"), [1, 2])

    def test_invalid_json(self):
        with self.assertRaises(DecodeError) as ctx:
            decode_response(b"not json")
        self.assertEqual(ctx.exception.category, ErrorCategory.DECODE)
        self.assertIsNotNone(ctx.exception.original_exception)

    def test_empty_body(self):
        with self.assertRaises(DecodeError):
            decode_response(b"")


if __name__ == "__main__":
    unittest.main()
