# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       conn
"""
from typing import TYPE_CHECKING, Any, Optional

from .base import HttpProtocolException
from ..responses import badGatewayResponse
from ...common.utils import bytes_


if TYPE_CHECKING:   # pragma: no cover
    from ..parser import HttpParser


class ProxyConnectionFailed(HttpProtocolException):
    """Exception raised when the proxy is unable to reach or talk to the upstream server.

    Covers name resolution, refused connections, timeouts and
    upstream responses that end before they are complete."""

    def __init__(self, host: str, port: int, reason: str, **kwargs: Any):
        self.host: str = host
        self.port: int = port
        self.reason: str = reason
        super().__init__('%s %s' % (self.__class__.__name__, reason), **kwargs)

    @property
    def description(self) -> str:
        return '%s:%d: %s' % (self.host, self.port, self.reason) \
            if self.host \
            else self.reason

    def response(self, _request: Optional['HttpParser']) -> memoryview:
        return badGatewayResponse(bytes_(self.description))
