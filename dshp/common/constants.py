# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import platform

from .version import __version__


SYS_PLATFORM = platform.system()
IS_WINDOWS = SYS_PLATFORM == 'Windows'

CRLF = b'\r\n'
COLON = b':'
WHITESPACE = b' '
COMMA = b','
SLASH = b'/'
AT = b'@'
HTTP_PROTO = b'http'
HTTPS_PROTO = HTTP_PROTO + b's'
HTTP_1_0 = HTTP_PROTO.upper() + SLASH + b'1.0'
HTTP_1_1 = HTTP_PROTO.upper() + SLASH + b'1.1'

PROXY_AGENT_HEADER_KEY = b'Proxy-agent'
PROXY_AGENT_HEADER_VALUE = b'dshp v' + \
    __version__.encode('utf-8', 'strict')

# Realm advertised in Proxy-Authenticate challenges
PROXY_AUTH_REALM = b'dshp'
BASIC_AUTH_SCHEME = b'Basic '

# Defaults
DEFAULT_LISTEN = '0.0.0.0:8080'
DEFAULT_USERNAME = ''
DEFAULT_PASSWORD = ''
DEFAULT_DEBUG = False
DEFAULT_BACKLOG = 100
DEFAULT_BUFFER_SIZE = 64 * 1024
DEFAULT_ALLOWED_URL_SCHEMES = [HTTP_PROTO, HTTPS_PROTO]
DEFAULT_HTTP_PORT = 80
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_PID_FILE = None
DEFAULT_PORT_FILE = None
DEFAULT_TIMEOUT = 10.0
DEFAULT_VERSION = False
# Seconds to wait for the event loop thread to come up or wind down
DEFAULT_LOOP_STARTUP_TIMEOUT = 5.0
