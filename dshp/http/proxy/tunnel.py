# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import asyncio
import logging

from typing import TYPE_CHECKING, Set

from .types import ProxyResponse
from .context import RequestContext
from ..client import connect_upstream
from ..upgrade import PendingUpgrade, UpgradeFailed
from ..responses import PROXY_TUNNEL_ESTABLISHED_RESPONSE_PKT
from ..exception import ProxyConnectionFailed
from ...core.base.tcp_tunnel import TcpTunnel
from ...common.constants import DEFAULT_TIMEOUT

if TYPE_CHECKING:   # pragma: no cover
    TunnelTask = asyncio.Task[None]
else:
    TunnelTask = asyncio.Task

logger = logging.getLogger(__name__)


class TunnelEstablisher:
    """Serves CONNECT requests.

    ``establish`` answers immediately with ``200 Connection established``
    and spawns a task which, once the protocol handler has handed over
    the client connection, connects to the target and relays bytes
    until either side closes.  Failures past the 200 can only be logged.

    Spawned tasks are tracked until they finish.  ``shutdown`` cancels
    whatever is still running, tunnels are not drained on exit.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self.tunnels: Set[TunnelTask] = set()

    def establish(self, host: str, port: int, context: RequestContext) -> ProxyResponse:
        upgrade = PendingUpgrade()
        task = asyncio.get_running_loop().create_task(
            self._tunnel(upgrade, host, port, context),
        )
        self.tunnels.add(task)
        task.add_done_callback(self.tunnels.discard)
        return ProxyResponse(PROXY_TUNNEL_ESTABLISHED_RESPONSE_PKT, upgrade=upgrade)

    async def shutdown(self) -> None:
        tunnels = list(self.tunnels)
        for task in tunnels:
            task.cancel()
        if tunnels:
            await asyncio.gather(*tunnels, return_exceptions=True)
            logger.debug('Cancelled %d open tunnels' % len(tunnels))

    async def _tunnel(
            self,
            upgrade: PendingUpgrade,
            host: str,
            port: int,
            context: RequestContext,
    ) -> None:
        target = '%s:%d' % (host, port)
        try:
            upgraded = await upgrade.wait()
        except UpgradeFailed as e:
            context.error('upgrade error: %s', e)
            return
        context.trace('upgrade completed, connecting to target %s', target)
        try:
            upstream = await connect_upstream(host, port, self.timeout)
        except ProxyConnectionFailed as e:
            context.error('CONNECT target connect error %s: %s', target, e.reason)
            await upgraded.client.close()
            return
        except asyncio.CancelledError:
            await upgraded.client.close()
            raise
        context.trace('connected to target %s', target)
        try:
            sent, received = await TcpTunnel(upgraded.client, upstream).run(
                initial=upgraded.leftover,
            )
            context.trace(
                'tunnel closed %s (%d bytes sent, %d bytes received)',
                target, sent, received,
            )
        except OSError as e:
            context.error('tunnel error %s: %s', target, e)
