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
import threading

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional

from dshp import TestCase
from dshp.http.parser import HttpParser, httpParserTypes
from dshp.http.methods import httpMethods
from dshp.common.utils import socket_connection, get_available_port


AUTHORIZATION = b'Proxy-Authorization: Basic YWxpY2U6c2VjcmV0\r\n'


class HelloHandler(BaseHTTPRequestHandler):
    protocol_version = 'HTTP/1.1'

    def do_GET(self) -> None:
        body = b'hello from ' + self.path.encode()
        self.send_response(200)
        self.send_header('Content-Type', 'text/plain')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args: Any) -> None:
        pass


def read_response(
        conn: socket.socket,
        request_method: Optional[bytes] = None,
) -> HttpParser:
    response = HttpParser(httpParserTypes.RESPONSE_PARSER, request_method)
    while not response.is_complete:
        data = conn.recv(65536)
        if not data:
            response.finish()
            break
        response.parse(memoryview(data))
    return response


class UpstreamMixin:
    """Runs a threaded origin server next to the proxy."""

    upstream: ThreadingHTTPServer
    upstream_port: int

    @classmethod
    def start_upstream(cls) -> None:
        cls.upstream = ThreadingHTTPServer(('127.0.0.1', 0), HelloHandler)
        cls.upstream.daemon_threads = True
        cls.upstream_port = cls.upstream.server_address[1]
        threading.Thread(target=cls.upstream.serve_forever, daemon=True).start()

    @classmethod
    def stop_upstream(cls) -> None:
        cls.upstream.shutdown()
        cls.upstream.server_close()


class TestAuthenticatedProxy(UpstreamMixin, TestCase):

    PROXY_PY_STARTUP_FLAGS = [
        '--username', 'alice',
        '--password', 'secret',
    ]

    @classmethod
    def setUpClass(cls) -> None:
        cls.start_upstream()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls) -> None:
        super().tearDownClass()
        cls.stop_upstream()

    def test_forwards_authenticated_request(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'GET http://127.0.0.1:%d/index HTTP/1.1\r\n'
                b'Host: 127.0.0.1:%d\r\n' % (self.upstream_port, self.upstream_port) +
                AUTHORIZATION + b'\r\n',
            )
            response = read_response(conn)
        self.assertEqual(response.code, b'200')
        self.assertEqual(response.body, b'hello from /index')

    def test_keep_alive_across_requests(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            for path in (b'/one', b'/two'):
                conn.sendall(
                    b'GET http://127.0.0.1:%d%s HTTP/1.1\r\n' % (self.upstream_port, path) +
                    AUTHORIZATION + b'\r\n',
                )
                response = read_response(conn)
                self.assertEqual(response.code, b'200')
                self.assertEqual(response.body, b'hello from ' + path)

    def test_missing_credentials(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'GET http://127.0.0.1:%d/ HTTP/1.1\r\n\r\n' % self.upstream_port,
            )
            response = read_response(conn)
        self.assertEqual(response.code, b'407')
        assert response.headers is not None
        self.assertEqual(
            response.headers[b'proxy-authenticate'][1],
            b'Basic realm="dshp"',
        )

    def test_wrong_credentials(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'GET http://127.0.0.1:%d/ HTTP/1.1\r\n'
                b'Proxy-Authorization: Basic YWxpY2U6d3Jvbmc=\r\n\r\n' % self.upstream_port,
            )
            self.assertEqual(read_response(conn).code, b'407')

    def test_connect_tunnel(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'CONNECT 127.0.0.1:%d HTTP/1.1\r\n' % self.upstream_port +
                AUTHORIZATION + b'\r\n',
            )
            established = read_response(conn, httpMethods.CONNECT)
            self.assertEqual(established.code, b'200')
            self.assertEqual(established.reason, b'Connection established')
            conn.sendall(b'GET /tunneled HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n')
            response = read_response(conn)
        self.assertEqual(response.code, b'200')
        self.assertEqual(response.body, b'hello from /tunneled')

    def test_unreachable_upstream(self) -> None:
        port = get_available_port()
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'GET http://127.0.0.1:%d/ HTTP/1.1\r\n' % port +
                AUTHORIZATION + b'\r\n',
            )
            response = read_response(conn)
        self.assertEqual(response.code, b'502')
        assert response.body is not None
        self.assertTrue(response.body.startswith(b'Upstream error: '))

    def test_connect_without_port(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(b'CONNECT 127.0.0.1 HTTP/1.1\r\n' + AUTHORIZATION + b'\r\n')
            response = read_response(conn)
            self.assertEqual(response.code, b'400')
            self.assertEqual(conn.recv(1), b'')


class TestOpenProxy(UpstreamMixin, TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.start_upstream()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls) -> None:
        super().tearDownClass()
        cls.stop_upstream()

    def test_forwards_without_credentials(self) -> None:
        with socket_connection(('127.0.0.1', self.PROXY_PORT)) as conn:
            conn.sendall(
                b'GET http://127.0.0.1:%d/open HTTP/1.1\r\n\r\n' % self.upstream_port,
            )
            response = read_response(conn)
        self.assertEqual(response.code, b'200')
        self.assertEqual(response.body, b'hello from /open')
