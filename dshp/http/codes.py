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


HttpStatusCodes = NamedTuple(
    'HttpStatusCodes', [
        # 1xx
        ('CONTINUE', int),
        ('SWITCHING_PROTOCOLS', int),
        # 2xx
        ('OK', int),
        ('NO_CONTENT', int),
        # 3xx
        ('MULTIPLE_CHOICES', int),
        ('NOT_MODIFIED', int),
        # 4xx
        ('BAD_REQUEST', int),
        ('PROXY_AUTH_REQUIRED', int),
        # 5xx
        ('BAD_GATEWAY', int),
    ],
)

httpStatusCodes = HttpStatusCodes(
    100, 101,
    200, 204,
    300, 304,
    400, 407,
    502,
)
