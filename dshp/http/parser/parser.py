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
"""
from typing import Dict, List, Type, Tuple, TypeVar, Optional

from ..url import Url
from .chunk import ChunkParser
from .types import httpParserTypes, httpParserStates
from ..codes import httpStatusCodes
from ..headers import httpHeaders
from ..methods import httpMethods
from ..exception import HttpProtocolException
from ...common.utils import text_, build_http_request
from ...common.constants import (
    CRLF, COLON, COMMA, HTTP_1_0, HTTP_1_1, WHITESPACE, DEFAULT_HTTP_PORT,
)


T = TypeVar('T', bound='HttpParser')


class HttpParser:
    """HTTP/1.x request/response parser.

    Bytes are fed incrementally via :meth:`parse`.  Once
    :attr:`is_complete`, any bytes received past the end of the
    message are available in :attr:`buffer`, e.g. the next pipelined
    request or the first bytes of a CONNECT tunnel.

    Response parsers must be told the request method, responses
    to ``HEAD`` and 2xx responses to ``CONNECT`` never carry a body.
    Responses without any framing are close-delimited, call
    :meth:`finish` once upstream hangs up.
    """

    def __init__(
            self, parser_type: int,
            request_method: Optional[bytes] = None,
    ) -> None:
        self.state: int = httpParserStates.INITIALIZED
        self.type: int = parser_type
        # Request attributes
        self.host: Optional[bytes] = None
        self.port: Optional[int] = None
        self.path: Optional[bytes] = None
        self.method: Optional[bytes] = None
        # Response attributes
        self.code: Optional[bytes] = None
        self.reason: Optional[bytes] = None
        self.version: Optional[bytes] = None
        # Method of the request this response answers
        self.request_method: Optional[bytes] = request_method
        # Total size of raw bytes passed for parsing
        self.total_size: int = 0
        # Buffer to hold unprocessed bytes
        self.buffer: Optional[memoryview] = None
        # Internal headers data structure:
        # - Keys are lower case header names.
        # - Values are 2-tuple containing original
        #   header and it's value as received.
        self.headers: Optional[Dict[bytes, Tuple[bytes, bytes]]] = None
        # Header fields in the order received, repeated fields kept apart
        self.header_lines: List[Tuple[bytes, bytes]] = []
        self.body: Optional[bytes] = None
        # Body bytes received so far, ``body`` is set once complete
        self._received_body = bytearray()
        self.chunk: Optional[ChunkParser] = None
        # Internal request line as a url structure
        self._url: Optional[Url] = None
        # Deduced states from the packet
        self._is_chunked_encoded: bool = False
        self._content_length: Optional[int] = None
        self._is_https_tunnel: bool = False

    @classmethod
    def request(cls: Type[T], raw: bytes) -> T:
        parser = cls(httpParserTypes.REQUEST_PARSER)
        parser.parse(memoryview(raw))
        return parser

    @classmethod
    def response(cls: Type[T], raw: bytes, request_method: Optional[bytes] = None) -> T:
        parser = cls(httpParserTypes.RESPONSE_PARSER, request_method=request_method)
        parser.parse(memoryview(raw))
        return parser

    def header(self, key: bytes) -> bytes:
        """Convenient method to return original header value from internal data structure."""
        if self.headers is None or key.lower() not in self.headers:
            raise KeyError('%s not found in headers' % text_(key))
        return self.headers[key.lower()][1]

    def has_header(self, key: bytes) -> bool:
        """Returns true if header key was found in payload."""
        if self.headers is None:
            return False
        return key.lower() in self.headers

    def add_header(self, key: bytes, value: bytes) -> bytes:
        """Add/Update a header to internal data structure.

        Returns key with which passed (key, value) tuple is available."""
        if self.headers is None:
            self.headers = {}
        k = key.lower()
        self.headers[k] = (key, value)
        self.header_lines = [
            line for line in self.header_lines if line[0].lower() != k
        ]
        self.header_lines.append((key, value))
        return k

    def del_header(self, header: bytes) -> None:
        """Delete a header from internal data structure."""
        k = header.lower()
        if self.headers and k in self.headers:
            del self.headers[k]
            self.header_lines = [
                line for line in self.header_lines if line[0].lower() != k
            ]

    def del_headers(self, headers: List[bytes]) -> None:
        """Delete headers from internal data structure."""
        for key in headers:
            self.del_header(key.lower())

    def set_url(self, url: bytes) -> None:
        """Given a request target, parses it and sets line attributes a.k.a. host, port, path."""
        self._url = Url.from_bytes(url)
        self._set_line_attributes()

    @property
    def url(self) -> Optional[Url]:
        return self._url

    @property
    def is_complete(self) -> bool:
        return self.state == httpParserStates.COMPLETE

    @property
    def is_keep_alive(self) -> bool:
        """Returns true when the sender is willing to reuse the connection.

        HTTP/1.1 defaults to persistent connections, HTTP/1.0
        only persists when asked to with ``Connection: keep-alive``."""
        tokens = self._connection_tokens()
        if self.version == HTTP_1_1:
            return b'close' not in tokens
        return self.version == HTTP_1_0 and b'keep-alive' in tokens

    @property
    def is_https_tunnel(self) -> bool:
        """Returns true for HTTPS CONNECT tunnel request."""
        return self._is_https_tunnel

    @property
    def is_chunked_encoded(self) -> bool:
        """Returns true if transfer-encoding chunked is used."""
        return self._is_chunked_encoded

    @property
    def content_expected(self) -> bool:
        """Returns true if content-length is present and not 0."""
        return self._content_length is not None and self._content_length > 0

    @property
    def body_expected(self) -> bool:
        """Returns true if content or chunked message is expected."""
        return self.content_expected or self._is_chunked_encoded

    @property
    def is_close_delimited(self) -> bool:
        """Returns true for a response whose body runs until the connection closes."""
        return self.type == httpParserTypes.RESPONSE_PARSER and \
            self._body_allowed() and \
            not self._is_chunked_encoded and \
            self._content_length is None

    def parse(self, raw: memoryview) -> None:
        """Parses HTTP message out of raw bytes.

        Check for `HttpParser.state` after `parse` has successfully returned."""
        size = len(raw)
        self.total_size += size
        if self.buffer:
            raw = memoryview(self.buffer.tobytes() + raw.tobytes())
        self.buffer, more = None, len(raw) > 0
        while more and self.state != httpParserStates.COMPLETE:
            # gte with HEADERS_COMPLETE also encapsulated RCVING_BODY state
            if self.state >= httpParserStates.HEADERS_COMPLETE:
                more, raw = self._process_body(raw)
            elif self.state == httpParserStates.INITIALIZED:
                more, raw = self._process_line(raw)
            else:
                more, raw = self._process_headers(raw)
            # Mark message as complete if headers received and no
            # body indication received.  Remaining bytes belong to
            # whatever follows on the connection.
            if self.state == httpParserStates.HEADERS_COMPLETE and \
                    not self._expects_body():
                self.state = httpParserStates.COMPLETE
        self.buffer = None if len(raw) == 0 else raw

    def finish(self) -> None:
        """Marks a close-delimited response complete.

        Raises :exc:`HttpProtocolException` if the peer closed
        before the message could be complete."""
        if self.is_complete:
            return
        if self.state >= httpParserStates.HEADERS_COMPLETE and self.is_close_delimited:
            self.body = bytes(self._received_body)
            self.state = httpParserStates.COMPLETE
            return
        raise HttpProtocolException('Connection closed before message was complete')

    @property
    def consumed_size(self) -> int:
        """Number of raw bytes that made up the parsed message."""
        return self.total_size - (len(self.buffer) if self.buffer else 0)

    def build(self, disable_headers: Optional[List[bytes]] = None) -> bytes:
        """Rebuild the request object in origin-form, as sent to origin servers."""
        assert self.method and self.version and self.type == httpParserTypes.REQUEST_PARSER
        if disable_headers is None:
            disable_headers = []
        body: Optional[bytes] = self._get_body_or_chunks()
        path = self._url.origin_form if self._url else (self.path or b'/')
        return build_http_request(
            self.method, path, self.version,
            headers=[
                (k, v) for k, v in self.header_lines
                if k.lower() not in disable_headers
            ],
            body=body,
        )

    def _body_allowed(self) -> bool:
        if self.type == httpParserTypes.REQUEST_PARSER:
            return True
        if self.request_method == httpMethods.HEAD:
            return False
        code = int(self.code) if self.code else 0
        if self.request_method == httpMethods.CONNECT and \
                httpStatusCodes.OK <= code < httpStatusCodes.MULTIPLE_CHOICES:
            return False
        return not (
            code < httpStatusCodes.OK or
            code in (httpStatusCodes.NO_CONTENT, httpStatusCodes.NOT_MODIFIED)
        )

    def _expects_body(self) -> bool:
        if not self._body_allowed():
            return False
        return self.body_expected or self.is_close_delimited

    def _connection_tokens(self) -> List[bytes]:
        if not self.has_header(httpHeaders.CONNECTION):
            return []
        return [
            token.strip().lower()
            for token in self.header(httpHeaders.CONNECTION).split(COMMA)
        ]

    def _process_body(self, raw: memoryview) -> Tuple[bool, memoryview]:
        # Ref: https://datatracker.ietf.org/doc/html/rfc7230#section-3.3.3
        # Transfer-Encoding overrides Content-Length when both are present.
        if not self._body_allowed():
            self.state = httpParserStates.COMPLETE
            return False, raw
        if self._is_chunked_encoded:
            if not self.chunk:
                self.chunk = ChunkParser()
            self.state = httpParserStates.RCVING_BODY
            remaining = self.chunk.parse(raw.tobytes())
            if self.chunk.is_complete:
                self.body = bytes(self.chunk.body)
                self.state = httpParserStates.COMPLETE
            return False, memoryview(remaining)
        if self._content_length is not None:
            self.state = httpParserStates.RCVING_BODY
            needed = self._content_length - len(self._received_body)
            self._received_body += raw[:needed]
            if len(self._received_body) == self._content_length:
                self.body = bytes(self._received_body)
                self.state = httpParserStates.COMPLETE
            return False, raw[needed:]
        # Close-delimited response body, consume everything until
        # the caller tells us upstream is done via ``finish``.
        self.state = httpParserStates.RCVING_BODY
        self._received_body += raw
        return False, memoryview(b'')

    def _process_headers(self, raw: memoryview) -> Tuple[bool, memoryview]:
        """Returns False when no CRLF could be found in received bytes."""
        while True:
            parts = raw.tobytes().split(CRLF, 1)
            if len(parts) == 1:
                return False, raw
            line, raw = parts[0], memoryview(parts[1])
            if line.strip() == b'':  # Blank line received.
                self.state = httpParserStates.HEADERS_COMPLETE
            else:
                self.state = httpParserStates.RCVING_HEADERS
                self._process_header(line)
            # If raw length is now zero, bail out
            # If we have received all headers, bail out
            if len(raw) == 0 or self.state == httpParserStates.HEADERS_COMPLETE:
                break
        return len(raw) > 0, raw

    def _process_line(self, raw: memoryview) -> Tuple[bool, memoryview]:
        while True:
            parts = raw.tobytes().split(CRLF, 1)
            if len(parts) == 1:
                return False, raw
            line, raw = parts[0], memoryview(parts[1])
            # Ref: https://datatracker.ietf.org/doc/html/rfc7230#section-3.5
            # Ignore empty lines preceding the start line.
            if line == b'':
                continue
            if self.type == httpParserTypes.REQUEST_PARSER:
                parts = line.split(WHITESPACE, 2)
                if len(parts) == 3 and parts[2].startswith(b'HTTP/'):
                    self.method = parts[0]
                    if self.method == httpMethods.CONNECT:
                        self._is_https_tunnel = True
                    self.set_url(parts[1])
                    self.version = parts[2]
                    self.state = httpParserStates.LINE_RCVD
                    break
                # To avoid a possible attack vector, we raise exception
                # if parser receives an invalid request line.
                raise HttpProtocolException('Invalid request line %r' % line)
            parts = line.split(WHITESPACE, 2)
            if len(parts) < 2 or not parts[0].startswith(b'HTTP/') or not parts[1].isdigit():
                raise HttpProtocolException('Invalid response line %r' % line)
            self.version = parts[0]
            self.code = parts[1]
            if len(parts) == 3:
                self.reason = parts[2]
            self.state = httpParserStates.LINE_RCVD
            break
        return len(raw) > 0, raw

    def _process_header(self, raw: bytes) -> None:
        parts = raw.split(COLON, 1)
        if len(parts) != 2 or parts[0].strip() == b'':
            raise HttpProtocolException('Invalid header line %r' % raw)
        key, value = parts[0].strip(), parts[1].strip()
        k = key.lower()
        self.header_lines.append((key, value))
        if self.headers is None:
            self.headers = {}
        # Lookups see repeated fields folded into a comma separated value
        if k in self.headers:
            key, value = self.headers[k][0], self.headers[k][1] + COMMA + WHITESPACE + value
        self.headers[k] = (key, value)
        if k == httpHeaders.CONTENT_LENGTH:
            try:
                self._content_length = int(value)
            except ValueError as e:
                raise HttpProtocolException(
                    'Invalid content-length %r' % value,
                ) from e
            if self._content_length < 0:
                raise HttpProtocolException('Negative content-length')
        elif k == httpHeaders.TRANSFER_ENCODING and \
                value.lower().split(COMMA)[-1].strip() == b'chunked':
            self._is_chunked_encoded = True

    def _get_body_or_chunks(self) -> Optional[bytes]:
        return ChunkParser.to_chunks(self.body) \
            if self.body and self._is_chunked_encoded else \
            self.body

    def _set_line_attributes(self) -> None:
        if self.type == httpParserTypes.REQUEST_PARSER:
            assert self._url
            self.host = self._url.hostname
            if self._is_https_tunnel:
                # CONNECT requires an explicit port, none means no usable target
                self.port = self._url.port
            else:
                self.port = self._url.port \
                    if self._url.port else DEFAULT_HTTP_PORT
            self.path = self._url.remainder
