# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .codes import httpStatusCodes
from ..common.utils import build_http_response
from ..common.constants import (
    PROXY_AGENT_HEADER_KEY, PROXY_AGENT_HEADER_VALUE, PROXY_AUTH_REALM,
)


PROXY_TUNNEL_ESTABLISHED_RESPONSE_PKT = memoryview(
    build_http_response(
        httpStatusCodes.OK,
        reason=b'Connection established',
    ),
)

PROXY_AUTH_FAILED_RESPONSE_PKT = memoryview(
    build_http_response(
        httpStatusCodes.PROXY_AUTH_REQUIRED,
        reason=b'Proxy Authentication Required',
        headers={
            PROXY_AGENT_HEADER_KEY: PROXY_AGENT_HEADER_VALUE,
            b'Proxy-Authenticate': b'Basic realm="' + PROXY_AUTH_REALM + b'"',
        },
        body=b'Proxy Authentication Required',
    ),
)

BAD_REQUEST_RESPONSE_PKT = memoryview(
    build_http_response(
        httpStatusCodes.BAD_REQUEST,
        reason=b'Bad Request',
        headers={
            PROXY_AGENT_HEADER_KEY: PROXY_AGENT_HEADER_VALUE,
            b'Content-Length': b'0',
        },
        conn_close=True,
    ),
)


def badGatewayResponse(description: bytes) -> memoryview:
    """502 carrying a human readable upstream failure description."""
    return memoryview(
        build_http_response(
            httpStatusCodes.BAD_GATEWAY,
            reason=b'Bad Gateway',
            headers={
                PROXY_AGENT_HEADER_KEY: PROXY_AGENT_HEADER_VALUE,
                b'Content-Type': b'text/plain; charset=utf-8',
            },
            body=b'Upstream error: ' + description,
            conn_close=True,
        ),
    )
