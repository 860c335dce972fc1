""" CORS endpoint matching """
from collections import namedtuple

WILDCARD_PREFIX = ':'
PREFLIGHT_METHOD = 'OPTIONS'

CORSEndpoint = namedtuple('CORSEndpoint', ['methods', 'path'])
CORSEndpoint.__doc__ = """A set of HTTP methods bound to a url path pattern."""


def split_pattern(path):
    """Split a path pattern into its segments.

    A single leading '/' is dropped, so '/foo/:bar' and 'foo/:bar' both give
    ['foo', ':bar']. An empty pattern (or '/') gives one empty segment.
    """
    if path.startswith('/'):
        path = path[1:]
    return path.split('/')


def request_method(req):
    """Upper-cased method of a request, or an empty string if it has none."""
    method = getattr(req, 'method', None)
    return method.upper() if isinstance(method, str) else ''


def split_path(path):
    """Split a request path into its non-empty segments."""
    if not isinstance(path, str):
        return []
    return [segment for segment in path.split('/') if segment]


def segments_match(pattern, segments):
    """True when every pattern segment equals or wildcards its request segment."""
    if len(pattern) != len(segments):
        return False
    for expected, actual in zip(pattern, segments):
        if expected != actual and not expected.startswith(WILDCARD_PREFIX):
            return False
    return True


def parse_endpoints(value):
    """Parse endpoints from a string like 'GET,PUT /foo/:bar;DELETE /baz'.

    Entries are separated by ';', methods by ','. Blank entries are ignored.
    """
    endpoints = []
    for entry in (value or '').split(';'):
        entry = entry.strip()
        if not entry:
            continue
        methods, _, path = entry.partition(' ')
        endpoints.append(([m for m in methods.split(',') if m], path.strip()))
    return endpoints


class EndpointMatcher():
    """Decides whether a request is covered by the CORS allow-list.

    Endpoints containing a variable path part can use ':foo', so '/foo/:bar'
    matches a URL like https://domain.com/foo/123.
    """

    def __init__(self, endpoints):
        self._endpoints = tuple(
            CORSEndpoint(tuple(method.upper() for method in methods), str(path))
            for methods, path in endpoints
        )

    @property
    def endpoints(self):
        """ configured allow-list, in matching order """
        return self._endpoints

    def is_allowed(self, method, segments):
        """Return True if the first satisfying endpoint covers method and path.

        OPTIONS requests pass the method check of every endpoint.
        """
        if not method:
            return False
        method = method.upper()
        segments = list(segments)
        for endpoint in self._endpoints:
            if method not in endpoint.methods and method != PREFLIGHT_METHOD:
                continue
            if segments_match(split_pattern(endpoint.path), segments):
                return True
        return False

    def matches_request(self, req):
        """ is_allowed for a falcon request """
        return self.is_allowed(
            request_method(req),
            split_path(getattr(req, 'path', None))
        )

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, list(self._endpoints))
