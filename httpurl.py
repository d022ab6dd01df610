from dataclasses import dataclass
from urllib.parse import urlsplit

from httperrors import UrlParseError

DEFAULT_PORTS = {'http': '80', 'https': '443'}

@dataclass(frozen=True)
class URLComponents:
    """Connection parameters taken from a URL"""
    protocol: str
    host: str
    port: str
    path: str
    fragment: str = ''

    @property
    def address(self):
        """(host, port) tuple for socket.create_connection"""
        return self.host, int(self.port)

def split_netloc(netloc):
    """Host and port text of a netloc as written, without case folding"""
    hostport = netloc.rpartition('@')[2]
    if hostport.startswith('['):
        host, _, rest = hostport[1:].partition(']')
        return host, rest[1:] if rest.startswith(':') else ''
    host, _, port = hostport.partition(':')
    return host, port

def resolve(url):
    """Split a URL string into protocol, host, port and path"""
    try:
        parsed = urlsplit(url)
        explicit_port = parsed.port
    except ValueError as e:
        raise UrlParseError(str(e)) from e

    if parsed.scheme in DEFAULT_PORTS and not parsed.hostname:
        raise UrlParseError(f"missing host in {url!r}")

    host, port = split_netloc(parsed.netloc)
    if explicit_port is None:
        port = DEFAULT_PORTS.get(parsed.scheme, '')

    # Query goes back on untouched, no re-encoding
    path = parsed.path or '/'
    if parsed.query:
        path += '?' + parsed.query

    return URLComponents(
        protocol=parsed.scheme,
        host=host,
        port=port,
        path=path,
        fragment=parsed.fragment,
    )
