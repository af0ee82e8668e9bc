# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .url import Url
from .codes import httpStatusCodes
from .client import HttpClient
from .handler import HttpProtocolHandler
from .headers import httpHeaders
from .methods import httpMethods


__all__ = [
    'HttpProtocolHandler',
    'HttpClient',
    'httpStatusCodes',
    'httpMethods',
    'httpHeaders',
    'Url',
]
