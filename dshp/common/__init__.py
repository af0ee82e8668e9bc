# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
