# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import TYPE_CHECKING, Any, Optional

from .base import HttpProtocolException
from ..codes import httpStatusCodes
from ...common.utils import bytes_, build_http_response
from ...common.constants import PROXY_AGENT_HEADER_KEY, PROXY_AGENT_HEADER_VALUE


if TYPE_CHECKING:   # pragma: no cover
    from ..parser import HttpParser


class HttpRequestRejected(HttpProtocolException):
    """Raised for requests the proxy refuses to act upon,
    e.g. a ``CONNECT`` without a ``host:port`` target.

    The client receives ``status_code`` with ``reason`` as plain-text
    body, after which its connection is closed."""

    def __init__(
            self,
            reason: str,
            status_code: int = httpStatusCodes.BAD_REQUEST,
            status_text: bytes = b'Bad Request',
            **kwargs: Any,
    ):
        self.reason: str = reason
        self.status_code: int = status_code
        self.status_text: bytes = status_text
        super().__init__(
            message='%s %d %s' % (self.__class__.__name__, status_code, reason),
            **kwargs,
        )

    def response(self, _request: Optional['HttpParser']) -> memoryview:
        return memoryview(
            build_http_response(
                status_code=self.status_code,
                reason=self.status_text,
                headers={
                    PROXY_AGENT_HEADER_KEY: PROXY_AGENT_HEADER_VALUE,
                    b'Content-Type': b'text/plain; charset=utf-8',
                },
                body=bytes_(self.reason),
                conn_close=True,
            ),
        )
