""" CORS Component """
import falcon
from .endpoints import EndpointMatcher, PREFLIGHT_METHOD, request_method

ALLOW_ORIGIN = '*'
ALLOW_HEADERS = ('accept', 'accept-language', 'authorization', 'content-type')
ALLOW_METHODS = ('GET', 'POST', 'PUT', 'DELETE')


def add_headers(resp):
    """Set the CORS headers on a response, replacing any previous values."""
    resp.set_headers((
        ('Access-Control-Allow-Origin', ALLOW_ORIGIN),
        ('Access-Control-Allow-Headers', ', '.join(ALLOW_HEADERS)),
        ('Access-Control-Allow-Methods', ', '.join(ALLOW_METHODS)),
    ))


def empty_response(resp):
    """Turn a response into an empty 200 OK."""
    resp.status = falcon.HTTP_200
    resp.text = None
    resp.media = None
    resp.stream = None
    resp.data = b''


class CORSComponent():
    """ CORSComponent class

    Only endpoints listed here will allow CORS. Each endpoint is a
    (methods, path) pair, e.g. (['GET', 'PUT'], '/api/:user/action').
    """
    def __init__(self, endpoints):
        self.matcher = EndpointMatcher(endpoints)

    @staticmethod
    def decorate(resp, is_preflight):
        """Add the CORS headers; preflight responses are emptied as well."""
        add_headers(resp)
        if is_preflight:
            # Just return an empty response for CORS Options.
            empty_response(resp)

    def process_response(self, req, resp, _resource, _req_succeeded):
        """Post-processing of the response (after routing).

        Adds the CORS headers when the request is on the allow-list.
        Anything without set_headers is left untouched.
        """
        if not hasattr(resp, 'set_headers'):
            return
        if self.matcher.matches_request(req):
            self.decorate(resp, request_method(req) == PREFLIGHT_METHOD)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, list(self.matcher.endpoints))


def cors(*endpoints):
    """Build a CORSComponent from (path, method, ...) tuples.

        cors(('/api/:user/action', 'GET', 'PUT'),
             ('/api/:user/delete', 'DELETE'))
    """
    return CORSComponent([(methods, path) for path, *methods in endpoints])
