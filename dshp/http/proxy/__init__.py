# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       Submodules
"""
from .types import ProxyResponse
from .context import RequestContext
from .auth import Authenticator, AuthOutcome
from .tunnel import TunnelEstablisher
from .forwarder import HttpForwarder
from .dispatcher import RequestDispatcher


__all__ = [
    'ProxyResponse',
    'RequestContext',
    'Authenticator',
    'AuthOutcome',
    'TunnelEstablisher',
    'HttpForwarder',
    'RequestDispatcher',
]
