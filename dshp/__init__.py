# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import Proxy, main, sleep_loop, entry_point
from .testing import TestCase


__all__ = [
    # PyPi package entry_point, installed as the ``dshp`` command
    'entry_point',
    # Embed dshp within another Python program
    'main',
    # Unit testing against a live dshp instance
    'TestCase',
    'Proxy',
    # Utility exposed for demos
    'sleep_loop',
]
