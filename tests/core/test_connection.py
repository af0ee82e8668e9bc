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

from typing import List

import pytest

from unittest import mock
from pytest_mock import MockerFixture

from dshp.core.connection import (
    TcpServerConnection, TcpClientConnection,
    TcpConnectionUninitializedException, tcpConnectionTypes,
)
from dshp.common.types import HostPort

from ..servers import LocalServer, connected_pair, echo


class TestTcpServerConnection:

    def test_uninitialized(self) -> None:
        conn = TcpServerConnection('127.0.0.1', 80)
        assert conn.closed
        assert conn.tag == 'server'
        with pytest.raises(TcpConnectionUninitializedException):
            conn.reader
        with pytest.raises(TcpConnectionUninitializedException):
            conn.writer

    def test_strips_ipv6_brackets(self) -> None:
        assert TcpServerConnection('[::1]', 443).addr == ('::1', 443)

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_queue_flush_recv(self) -> None:
        async with LocalServer(echo) as server:
            conn = TcpServerConnection('127.0.0.1', server.port)
            await conn.connect(timeout=5)
            assert not conn.closed
            assert await conn.flush() == 0
            conn.queue(memoryview(b'hello '))
            conn.queue(memoryview(b'world'))
            assert conn.has_buffer()
            assert await conn.flush() == 11
            assert not conn.has_buffer()
            received = b''
            while len(received) < 11:
                data = await conn.recv()
                assert data is not None
                received += data.tobytes()
            assert received == b'hello world'
            conn.write_eof()
            assert await conn.recv() is None
            assert await conn.close()
            # Closing twice is harmless
            assert await conn.close()

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_connect_refused(self) -> None:
        async def reject(_reader: asyncio.StreamReader, _writer: asyncio.StreamWriter) -> None:
            pass

        async with LocalServer(reject) as server:
            port = server.port
        conn = TcpServerConnection('127.0.0.1', port)
        with pytest.raises(OSError):
            await conn.connect()
        assert conn.closed

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_connect_timeout(self, mocker: MockerFixture) -> None:
        attempts: List[HostPort] = []

        async def never_connects(host: str, port: int) -> None:
            attempts.append((host, port))
            await asyncio.sleep(10)

        mocker.patch('asyncio.open_connection', new=never_connects)
        conn = TcpServerConnection('192.0.2.1', 80)
        with pytest.raises(asyncio.TimeoutError):
            await conn.connect(timeout=0.05)
        assert attempts == [('192.0.2.1', 80)]
        assert conn.closed


class TestTcpClientConnection:

    @pytest.mark.asyncio    # type: ignore[misc]
    async def test_address_from_peername(self) -> None:
        app_reader, app_writer, conn, front = await connected_pair()
        assert conn.tag == 'client'
        assert conn.addr is not None
        assert conn.addr[0] == '127.0.0.1'
        assert conn.address == '127.0.0.1:%d' % app_writer.get_extra_info('sockname')[1]
        app_writer.write(b'hi')
        await app_writer.drain()
        data = await conn.recv()
        assert data is not None and data.tobytes() == b'hi'
        app_writer.close()
        assert await conn.recv() is None
        await conn.close()
        front.close()

    def test_unknown_address(self) -> None:
        writer = mock.Mock()
        writer.get_extra_info.return_value = None
        conn = TcpClientConnection(mock.Mock(), writer)
        assert conn.addr is None
        assert conn.address == 'unknown'

    def test_explicit_address(self) -> None:
        conn = TcpClientConnection(mock.Mock(), mock.Mock(), ('10.0.0.1', 5000))
        assert conn.address == '10.0.0.1:5000'


def test_connection_types() -> None:
    assert tcpConnectionTypes.SERVER != tcpConnectionTypes.CLIENT
