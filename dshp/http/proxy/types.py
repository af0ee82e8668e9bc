# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import NamedTuple, Optional

from ..upgrade import PendingUpgrade


class ProxyResponse(NamedTuple):
    """What the dispatcher hands back for a single request."""
    pkt: memoryview
    # Close the client connection once pkt is written
    conn_close: bool = False
    # Set for CONNECT, to be completed after pkt is written
    upgrade: Optional[PendingUpgrade] = None
