# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import unittest

from dshp.http.parser import HttpParser
from dshp.http.exception import (
    HttpProtocolException, HttpRequestRejected,
    ProxyAuthenticationFailed, ProxyConnectionFailed,
)
from dshp.http.responses import PROXY_AUTH_FAILED_RESPONSE_PKT


class TestHttpExceptions(unittest.TestCase):

    def setUp(self) -> None:
        self.request = HttpParser.request(b'GET http://example.com/ HTTP/1.1\r\n\r\n')

    def test_request_rejected_defaults_to_bad_request(self) -> None:
        e = HttpRequestRejected('CONNECT requires a host:port target')
        self.assertIsInstance(e, HttpProtocolException)
        response = HttpParser.response(e.response(self.request).tobytes())
        self.assertEqual(response.code, b'400')
        self.assertEqual(response.reason, b'Bad Request')
        self.assertEqual(response.body, b'CONNECT requires a host:port target')
        self.assertEqual(response.header(b'connection'), b'close')

    def test_request_rejected_custom_status(self) -> None:
        e = HttpRequestRejected('nope', status_code=418, status_text=b'I\'m a teapot')
        response = HttpParser.response(e.response(None).tobytes())
        self.assertEqual(response.code, b'418')
        self.assertEqual(response.reason, b'I\'m a teapot')
        self.assertIn('418', str(e))

    def test_proxy_authentication_failed(self) -> None:
        e = ProxyAuthenticationFailed('credentials mismatch')
        self.assertEqual(e.reason, 'credentials mismatch')
        self.assertIs(e.response(self.request), PROXY_AUTH_FAILED_RESPONSE_PKT)

    def test_proxy_connection_failed(self) -> None:
        e = ProxyConnectionFailed('example.invalid', 80, 'Name or service not known')
        self.assertEqual(e.description, 'example.invalid:80: Name or service not known')
        response = HttpParser.response(e.response(self.request).tobytes())
        self.assertEqual(response.code, b'502')
        self.assertEqual(
            response.body,
            b'Upstream error: example.invalid:80: Name or service not known',
        )

    def test_proxy_connection_failed_without_host(self) -> None:
        e = ProxyConnectionFailed('', 0, 'request URI is not absolute')
        self.assertEqual(e.description, 'request URI is not absolute')
