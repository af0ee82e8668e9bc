# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import argparse

from typing import NamedTuple, Optional

from .types import Credential, IpAddress


class ProxyConfig(NamedTuple):
    """Immutable runtime configuration shared by every connection.

    ``credential`` is ``None`` when proxy authentication is disabled.
    ``timeout`` of ``0`` disables upstream timeouts."""
    hostname: IpAddress
    port: int
    credential: Optional[Credential]
    debug: bool
    timeout: float

    @property
    def listen_address(self) -> str:
        if self.hostname.version == 6:
            return '[%s]:%d' % (self.hostname, self.port)
        return '%s:%d' % (self.hostname, self.port)

    @property
    def auth_enabled(self) -> bool:
        return self.credential is not None

    @classmethod
    def from_flags(cls, flags: argparse.Namespace) -> 'ProxyConfig':
        # An empty username means no credential is configured
        credential = (flags.username, flags.password) \
            if flags.username \
            else None
        return cls(
            hostname=flags.hostname,
            port=flags.port,
            credential=credential,
            debug=flags.debug,
            timeout=flags.timeout,
        )
