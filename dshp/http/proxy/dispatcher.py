# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .auth import Authenticator
from .types import ProxyResponse
from .tunnel import TunnelEstablisher
from .context import RequestContext
from .forwarder import HttpForwarder
from ..client import HttpClient
from ..parser import HttpParser
from ..exception import HttpRequestRejected
from ...core.counter import RequestIdGenerator
from ...common.utils import text_
from ...common.config import ProxyConfig


class RequestDispatcher:
    """Per-request entry point.

    Assigns a request id, authenticates, then routes CONNECT requests
    to the :class:`TunnelEstablisher` and everything else to the
    :class:`HttpForwarder`.
    """

    def __init__(
            self,
            config: ProxyConfig,
            ids: RequestIdGenerator,
            authenticator: Authenticator,
            tunnels: TunnelEstablisher,
            forwarder: HttpForwarder,
    ) -> None:
        self.config = config
        self.ids = ids
        self.authenticator = authenticator
        self.tunnels = tunnels
        self.forwarder = forwarder

    @classmethod
    def from_config(cls, config: ProxyConfig, ids: RequestIdGenerator) -> 'RequestDispatcher':
        return cls(
            config,
            ids,
            Authenticator(config.credential),
            TunnelEstablisher(config.timeout),
            HttpForwarder(HttpClient(config.timeout)),
        )

    async def dispatch(self, request: HttpParser, peer: str) -> ProxyResponse:
        context = RequestContext(self.ids.next_id(), self.config.debug)
        context.trace(
            '%s %s from %s',
            text_(request.method), request.url, peer,
        )
        outcome = self.authenticator.authenticate(request)
        if not outcome.allowed:
            context.trace('auth failed')
            assert outcome.response is not None
            return ProxyResponse(outcome.response)
        if request.is_https_tunnel:
            if not request.host or request.port is None:
                context.trace('CONNECT without host:port target')
                rejection = HttpRequestRejected('CONNECT requires a host:port target')
                return ProxyResponse(rejection.response(request), conn_close=True)
            host = text_(request.host)
            context.trace('CONNECT to %s:%d', host, request.port)
            return self.tunnels.establish(host, request.port, context)
        return await self.forwarder.forward(request, context)

    async def shutdown(self) -> None:
        await self.tunnels.shutdown()
