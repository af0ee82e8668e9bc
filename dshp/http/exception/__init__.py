# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .base import HttpProtocolException
from .proxy_auth_failed import ProxyAuthenticationFailed
from .proxy_conn_failed import ProxyConnectionFailed
from .http_request_rejected import HttpRequestRejected


__all__ = [
    'HttpProtocolException',
    'HttpRequestRejected',
    'ProxyAuthenticationFailed',
    'ProxyConnectionFailed',
]
