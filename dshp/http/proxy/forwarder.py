# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Tuple

from .types import ProxyResponse
from .context import RequestContext
from ..client import HttpClient
from ..parser import HttpParser
from ..headers import httpHeaders
from ..exception import ProxyConnectionFailed
from ...common.utils import text_, bytes_
from ...common.constants import COLON, HTTP_PROTO, DEFAULT_HTTP_PORT


class HttpForwarder:
    """Forwards plain HTTP requests to the server named by their
    absolute-form target and relays the response unmodified.

    The request goes upstream in origin-form.  ``Proxy-Authorization``
    and ``Proxy-Connection`` are meant for us and are not passed on.
    Every upstream failure is answered with ``502 Bad Gateway``.
    """

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def forward(self, request: HttpParser, context: RequestContext) -> ProxyResponse:
        context.trace('forwarding HTTP request %s', request.url)
        try:
            host, port = self._target(request)
            response, raw = await self.client.request(
                text_(host), port, self._rebuild(request, host, port),
                method=request.method,
            )
        except ProxyConnectionFailed as e:
            context.trace('upstream error: %s', e.description)
            return ProxyResponse(e.response(request), conn_close=True)
        context.trace('upstream response %s', text_(response.code))
        return ProxyResponse(
            memoryview(raw),
            conn_close=response.is_close_delimited or not response.is_keep_alive,
        )

    @staticmethod
    def _target(request: HttpParser) -> Tuple[bytes, int]:
        url = request.url
        if url is None or url.scheme is None:
            raise ProxyConnectionFailed('', 0, 'request URI is not absolute')
        if url.scheme != HTTP_PROTO:
            raise ProxyConnectionFailed(
                '', 0, 'unsupported scheme %s' % text_(url.scheme),
            )
        if not url.is_absolute or url.hostname is None:
            raise ProxyConnectionFailed('', 0, 'request URI has no host')
        return url.hostname, url.port or DEFAULT_HTTP_PORT

    @staticmethod
    def _rebuild(request: HttpParser, host: bytes, port: int) -> bytes:
        request.del_headers([
            httpHeaders.PROXY_AUTHORIZATION,
            httpHeaders.PROXY_CONNECTION,
        ])
        if not request.has_header(httpHeaders.HOST):
            request.add_header(
                b'Host',
                host if port == DEFAULT_HTTP_PORT else host + COLON + bytes_(port),
            )
        return request.build()
