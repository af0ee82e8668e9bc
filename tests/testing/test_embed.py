# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket

from dshp import TestCase
from dshp.http.parser import HttpParser, httpParserTypes
from dshp.common.utils import socket_connection, get_available_port


class TestProxyTestCase(TestCase):
    """Tests for dshp.TestCase, the base class embedders test with."""

    PROXY_PY_STARTUP_FLAGS = ['--timeout', '5']

    def test_proxy_started(self) -> None:
        assert self.PROXY is not None
        self.assertGreater(self.PROXY_PORT, 0)
        self.assertEqual(self.PROXY.flags.port, self.PROXY_PORT)
        self.assertEqual(self.PROXY.flags.timeout, 5)
        self.assertEqual(self.INPUT_ARGS, ['--timeout', '5', '--listen', '127.0.0.1:0'])

    def test_origin_form_request_rejected(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(b'GET / HTTP/1.1\r\nHost: localhost\r\n\r\n')
            response = self._read_response(conn)
        self.assertEqual(response.code, b'502')
        self.assertEqual(response.body, b'Upstream error: request URI is not absolute')

    def test_wait_for_server_times_out(self) -> None:
        with self.assertRaises(TimeoutError):
            self.wait_for_server(get_available_port(), wait_for_seconds=0.2)

    @staticmethod
    def _read_response(conn: socket.socket) -> HttpParser:
        response = HttpParser(httpParserTypes.RESPONSE_PARSER)
        while not response.is_complete:
            data = conn.recv(65536)
            if not data:
                response.finish()
                break
            response.parse(memoryview(data))
        return response
