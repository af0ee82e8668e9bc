# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       auth
       http
"""
from typing import TYPE_CHECKING, Any, Optional

from .base import HttpProtocolException

from ..responses import PROXY_AUTH_FAILED_RESPONSE_PKT

if TYPE_CHECKING:   # pragma: no cover
    from ..parser import HttpParser


class ProxyAuthenticationFailed(HttpProtocolException):
    """Exception raised when proxy auth is enabled and
    incoming request doesn't present the configured credential."""

    def __init__(self, reason: str = 'credentials missing', **kwargs: Any) -> None:
        self.reason = reason
        super().__init__('%s: %s' % (self.__class__.__name__, reason), **kwargs)

    def response(self, _request: Optional['HttpParser']) -> memoryview:
        return PROXY_AUTH_FAILED_RESPONSE_PKT
