# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Tuple, List, Optional

from .types import chunkParserStates
from ..exception.base import HttpProtocolException
from ...common.utils import bytes_, find_http_line
from ...common.constants import CRLF, DEFAULT_BUFFER_SIZE


class ChunkParser:
    """HTTP chunked transfer-encoding parser.

    Trailer fields following the last chunk are consumed and discarded."""

    def __init__(self) -> None:
        self.state = chunkParserStates.WAITING_FOR_SIZE
        self.body = bytearray()  # Parsed chunks
        self.chunk: bytes = b''  # Partial line received
        # Expected size of next following chunk
        self.size: Optional[int] = None
        # Bytes of the current chunk received so far
        self.received: int = 0

    @property
    def is_complete(self) -> bool:
        return self.state == chunkParserStates.COMPLETE

    def parse(self, raw: bytes) -> bytes:
        """Consumes ``raw`` and returns whatever follows the last chunk."""
        more = len(raw) > 0
        while more and self.state != chunkParserStates.COMPLETE:
            more, raw = self.process(raw)
        return raw

    def process(self, raw: bytes) -> Tuple[bool, bytes]:
        if self.state == chunkParserStates.WAITING_FOR_SIZE:
            # Consume prior chunk in buffer
            # in case chunk size without CRLF was received
            raw = self.chunk + raw
            self.chunk = b''
            line, raw = find_http_line(raw)
            if line is None:
                self.chunk = raw
                raw = b''
            else:
                # Chunk extensions follow a semicolon, we ignore them
                size = line.split(b';', 1)[0].strip()
                try:
                    self.size = int(size, 16)
                except ValueError as e:
                    raise HttpProtocolException(
                        'Invalid chunk size %r' % line,
                    ) from e
                self.state = chunkParserStates.WAITING_FOR_DATA
        elif self.state == chunkParserStates.WAITING_FOR_DATA:
            assert self.size is not None
            data = raw[:self.size - self.received]
            self.body += data
            self.received += len(data)
            raw = raw[len(data):]
            if self.received == self.size:
                self.received = 0
                self.state = chunkParserStates.WAITING_FOR_DATA_END
        else:
            raw = self.chunk + raw
            self.chunk = b''
            line, raw = find_http_line(raw)
            if line is None:
                self.chunk = raw
                raw = b''
            elif line != b'':
                if self.size != 0:
                    raise HttpProtocolException('Missing CRLF after chunk data')
                # Trailer field, keep waiting for the terminating blank line
            elif self.size == 0:
                self.state = chunkParserStates.COMPLETE
            else:
                self.size = None
                self.state = chunkParserStates.WAITING_FOR_SIZE
        return len(raw) > 0, raw

    @staticmethod
    def to_chunks(raw: bytes, chunk_size: int = DEFAULT_BUFFER_SIZE) -> bytes:
        chunks: List[bytes] = []
        for i in range(0, len(raw), chunk_size):
            chunk = raw[i: i + chunk_size]
            chunks.append(bytes_('{:x}'.format(len(chunk))))
            chunks.append(chunk)
        chunks.append(bytes_('{:x}'.format(0)))
        chunks.append(b'')
        return CRLF.join(chunks) + CRLF
