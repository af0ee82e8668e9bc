# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import ipaddress
from typing import Dict, List, Tuple, Union


IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
HostPort = Tuple[str, int]
# Username and password pair
Credential = Tuple[str, str]
# Header fields either keyed by name, or as (name, value)
# pairs where a name may repeat
HttpHeaders = Union[Dict[bytes, bytes], List[Tuple[bytes, bytes]]]
