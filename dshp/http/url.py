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
       url
"""
from typing import List, Tuple, Optional

from .exception.base import HttpProtocolException
from ..common.utils import text_
from ..common.constants import (
    AT, COLON, SLASH, DEFAULT_ALLOWED_URL_SCHEMES,
)


class Url:
    """``urllib.urlparse`` doesn't work for request targets, so we wrote a simple URL.

    A request target arrives in one of three shapes:

    * origin-form, ``/get?key=value``, sent to origin servers
    * authority-form, ``httpbin.org:443``, sent with ``CONNECT``
    * absolute-form, ``http://httpbin.org/get``, sent to forward proxies
    """

    def __init__(
            self,
            scheme: Optional[bytes] = None,
            hostname: Optional[bytes] = None,
            port: Optional[int] = None,
            remainder: Optional[bytes] = None,
    ) -> None:
        self.scheme: Optional[bytes] = scheme
        self.hostname: Optional[bytes] = hostname
        self.port: Optional[int] = port
        self.remainder: Optional[bytes] = remainder

    @property
    def is_absolute(self) -> bool:
        return self.scheme is not None and bool(self.hostname)

    @property
    def origin_form(self) -> bytes:
        """Path and query to put on the request line sent upstream."""
        return self.remainder or SLASH

    @property
    def authority(self) -> Optional[bytes]:
        if self.hostname is None:
            return None
        if self.port is None:
            return self.hostname
        return self.hostname + COLON + str(self.port).encode()

    def __str__(self) -> str:
        url = ''
        if self.scheme:
            url += '{0}://'.format(text_(self.scheme))
        if self.hostname:
            url += text_(self.hostname)
        if self.port:
            url += ':{0}'.format(self.port)
        if self.remainder:
            url += text_(self.remainder)
        return url

    @classmethod
    def from_bytes(cls, raw: bytes, allowed_url_schemes: Optional[List[bytes]] = None) -> 'Url':
        """Parses a request target.

        Example:
        For origin-form, url is like ``/`` or ``/get`` or ``/get?key=value``
        For a CONNECT tunnel, url is like ``httpbin.org:443``
        For a HTTP proxy request, url is like ``http://httpbin.org/get``

        If a url with no scheme is parsed, e.g. ``//host/abc.js``, then scheme
        defaults to `http`.  URL may contain IPv4 and IPv6 format addresses
        instead of domain names.
        """
        if not raw:
            raise HttpProtocolException('Empty request target')
        # SLASH == 47, check if URL starts with single slash but not double slash
        starts_with_single_slash = raw[0] == 47
        starts_with_double_slash = starts_with_single_slash and \
            len(raw) >= 2 and \
            raw[1] == 47
        if starts_with_single_slash and \
                not starts_with_double_slash:
            return cls(remainder=raw)
        scheme = None
        rest = None
        if not starts_with_double_slash:
            # Find scheme
            parts = raw.split(b'://', 1)
            if len(parts) == 2:
                scheme = parts[0].lower()
                rest = parts[1]
                if scheme not in (allowed_url_schemes or DEFAULT_ALLOWED_URL_SCHEMES):
                    raise HttpProtocolException(
                        'Invalid scheme received in the request line %r' % raw,
                    )
        else:
            rest = raw[len(SLASH + SLASH):]
        if scheme is not None or starts_with_double_slash:
            assert rest is not None
            parts = rest.split(SLASH, 1)
            host, port = Url._parse(parts[0])
            return cls(
                scheme=scheme if not starts_with_double_slash else b'http',
                hostname=host,
                port=port,
                remainder=None if len(parts) == 1 else (
                    SLASH + parts[1]
                ),
            )
        host, port = Url._parse(raw)
        return cls(hostname=host, port=port)

    @staticmethod
    def _parse(raw: bytes) -> Tuple[bytes, Optional[int]]:
        # Userinfo is never sent upstream, drop it
        hostport = raw.split(AT, 1)[-1]
        # Bracketed IPv6 literal, optionally followed by :port
        if hostport.startswith(b'['):
            end = hostport.find(b']')
            if end == -1:
                raise HttpProtocolException('Invalid IPv6 host %r' % raw)
            host, tail = hostport[:end + 1], hostport[end + 1:]
            if tail == b'':
                return host, None
            if not tail.startswith(COLON):
                raise HttpProtocolException('Invalid host %r' % raw)
            return host, Url._port(tail[1:], raw)
        parts = hostport.split(COLON)
        # No port found
        if len(parts) == 1:
            return parts[0], None
        # Host and port found
        if len(parts) == 2:
            return parts[0], Url._port(parts[1], raw)
        # More than a single COLON, an unbracketed IPv6 scenario.
        # Try to resolve last part as an int port, otherwise
        # treat entire data as host.
        try:
            port: Optional[int] = int(parts[-1])
            host = COLON.join(parts[:-1])
        except ValueError:
            host, port = hostport, None
        return b'[' + host + b']', port

    @staticmethod
    def _port(raw_port: bytes, raw: bytes) -> Optional[int]:
        if raw_port == b'':
            return None
        try:
            port = int(raw_port)
        except ValueError as e:
            raise HttpProtocolException('Invalid port in %r' % raw) from e
        if not 0 < port <= 65535:
            raise HttpProtocolException('Port out of range in %r' % raw)
        return port
