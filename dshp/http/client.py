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

from typing import Any, Awaitable, Optional, Tuple, TypeVar

from .parser import HttpParser, httpParserTypes
from .codes import httpStatusCodes
from .exception import HttpProtocolException, ProxyConnectionFailed
from ..core.connection import TcpServerConnection
from ..common.flag import flags
from ..common.constants import DEFAULT_TIMEOUT


flags.add_argument(
    '--timeout',
    type=float,
    default=DEFAULT_TIMEOUT,
    help='Default: ' + str(int(DEFAULT_TIMEOUT)) + '.  Seconds to wait when connecting '
    'to upstream servers and for each read of an upstream response.  0 waits forever.',
)

logger = logging.getLogger(__name__)

R = TypeVar('R')


def describe_error(e: BaseException) -> str:
    if isinstance(e, asyncio.TimeoutError):
        return 'timed out'
    return str(e) or e.__class__.__name__


async def with_timeout(aw: Awaitable[R], timeout: float) -> R:
    """Awaits ``aw``, bounded by ``timeout`` seconds when positive."""
    if timeout > 0:
        return await asyncio.wait_for(aw, timeout)
    return await aw


async def connect_upstream(host: str, port: int, timeout: float) -> TcpServerConnection:
    """Opens a connection to ``host:port`` or raises :exc:`ProxyConnectionFailed`."""
    upstream = TcpServerConnection(host, port)
    try:
        await upstream.connect(timeout=timeout)
    except (OSError, asyncio.TimeoutError) as e:
        raise ProxyConnectionFailed(host, port, describe_error(e)) from e
    logger.debug('Connection established with upstream %s:%d' % (host, port))
    return upstream


class HttpClient:
    """Sends a single request to an upstream server and reads back
    exactly one final response.

    A fresh upstream connection is used per request and closed
    afterwards.  Any failure surfaces as :exc:`ProxyConnectionFailed`.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    async def request(
            self,
            host: str,
            port: int,
            pkt: bytes,
            method: Optional[bytes] = None,
    ) -> Tuple[HttpParser, bytes]:
        """Returns the parsed final response along with its raw bytes.

        Interim ``1xx`` responses, if any, are part of the raw bytes."""
        upstream = await connect_upstream(host, port, self.timeout)
        try:
            upstream.queue(memoryview(pkt))
            await self._bounded(upstream.flush())
            received = bytearray()
            # Offset in received bytes where the last parsed response ends
            end = 0
            pending: Optional[memoryview] = None
            while True:
                response = HttpParser(
                    httpParserTypes.RESPONSE_PARSER,
                    request_method=method,
                )
                if pending is not None:
                    response.parse(pending)
                while not response.is_complete:
                    data = await self._bounded(upstream.recv())
                    if data is None:
                        response.finish()
                        break
                    received += data
                    response.parse(data)
                end += response.consumed_size
                pending = response.buffer
                if not self._is_interim(response):
                    # Anything upstream sent past the response is dropped
                    del received[end:]
                    return response, bytes(received)
        except (OSError, asyncio.TimeoutError, HttpProtocolException) as e:
            raise ProxyConnectionFailed(host, port, describe_error(e)) from e
        finally:
            await upstream.close()

    async def _bounded(self, aw: Awaitable[Any]) -> Any:
        return await with_timeout(aw, self.timeout)

    @staticmethod
    def _is_interim(response: HttpParser) -> bool:
        code = int(response.code) if response.code else 0
        return httpStatusCodes.CONTINUE <= code < httpStatusCodes.OK and \
            code != httpStatusCodes.SWITCHING_PROTOCOLS
