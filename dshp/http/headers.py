# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
       iterable
"""
from typing import NamedTuple


# Lower cased, as stored by HttpParser
HttpHeaders = NamedTuple(
    'HttpHeaders', [
        ('HOST', bytes),
        ('CONNECTION', bytes),
        ('CONTENT_LENGTH', bytes),
        ('CONTENT_TYPE', bytes),
        ('TRANSFER_ENCODING', bytes),
        ('PROXY_AUTHORIZATION', bytes),
        ('PROXY_AUTHENTICATE', bytes),
        ('PROXY_CONNECTION', bytes),
    ],
)

httpHeaders = HttpHeaders(
    b'host',
    b'connection',
    b'content-length',
    b'content-type',
    b'transfer-encoding',
    b'proxy-authorization',
    b'proxy-authenticate',
    b'proxy-connection',
)
