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


# Ref: https://www.iana.org/assignments/http-methods/http-methods.xhtml
#
# Only methods the proxy treats specially or tests exercise are listed,
# any other token is forwarded as-is.
HttpMethods = NamedTuple(
    'HttpMethods', [
        ('CONNECT', bytes),
        ('DELETE', bytes),
        ('GET', bytes),
        ('HEAD', bytes),
        ('OPTIONS', bytes),
        ('PATCH', bytes),
        ('POST', bytes),
        ('PUT', bytes),
        ('TRACE', bytes),
    ],
)

httpMethods = HttpMethods(
    b'CONNECT',
    b'DELETE',
    b'GET',
    b'HEAD',
    b'OPTIONS',
    b'PATCH',
    b'POST',
    b'PUT',
    b'TRACE',
)
