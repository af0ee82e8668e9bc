# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       auth
       http
"""
import hmac
import base64
import binascii

from typing import NamedTuple, Optional

from ..headers import httpHeaders
from ..parser import HttpParser
from ..exception import ProxyAuthenticationFailed
from ...common.flag import flags
from ...common.types import Credential
from ...common.utils import bytes_
from ...common.constants import BASIC_AUTH_SCHEME, DEFAULT_USERNAME, DEFAULT_PASSWORD


flags.add_argument(
    '--username',
    type=str,
    default=DEFAULT_USERNAME,
    help='Default: No authentication.  Username clients must present '
    'via Proxy-Authorization.  Leave empty to disable authentication.',
)

flags.add_argument(
    '--password',
    type=str,
    default=DEFAULT_PASSWORD,
    help='Default: empty.  Password paired with --username.',
)


class AuthOutcome(NamedTuple):
    allowed: bool
    # Challenge to send back when not allowed
    response: Optional[memoryview] = None


ALLOWED = AuthOutcome(allowed=True)


class Authenticator:
    """Performs proxy authentication against a single shared credential.

    Without a configured credential every request is allowed.  Otherwise
    the request must carry ``Proxy-Authorization: Basic <token>`` where
    token is the strict base64 encoding of ``username:password``.
    The scheme prefix is matched case-sensitively and the decoded value
    must be valid UTF-8.  Pure, logs nothing.
    """

    def __init__(self, credential: Optional[Credential]) -> None:
        self.auth_code: Optional[bytes] = None \
            if credential is None \
            else bytes_('%s:%s' % credential)

    def authenticate(self, request: HttpParser) -> AuthOutcome:
        if self.auth_code is None:
            return ALLOWED
        try:
            self._verify(request)
        except ProxyAuthenticationFailed as e:
            return AuthOutcome(allowed=False, response=e.response(request))
        return ALLOWED

    def _verify(self, request: HttpParser) -> None:
        assert self.auth_code is not None
        if not request.has_header(httpHeaders.PROXY_AUTHORIZATION):
            raise ProxyAuthenticationFailed('credentials missing')
        value = request.header(httpHeaders.PROXY_AUTHORIZATION)
        if not value.startswith(BASIC_AUTH_SCHEME):
            raise ProxyAuthenticationFailed('unsupported scheme')
        try:
            decoded = base64.b64decode(value[len(BASIC_AUTH_SCHEME):], validate=True)
            decoded.decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ProxyAuthenticationFailed('malformed credentials') from e
        if not hmac.compare_digest(decoded, self.auth_code):
            raise ProxyAuthenticationFailed('credentials mismatch')
