"""Shared fixtures for the CORS tests."""
import falcon
import falcon.testing

from endpoint_cors.components.cors import ALLOW_HEADERS, ALLOW_METHODS

BODY = "Hello World!"


class Endpoint():
    """Plain text resource standing in for an application handler."""
    #pylint: disable=too-few-public-methods,no-self-use

    def on_get(self, _req, resp):
        """ on GET request """
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = BODY


def make_client(*middleware, prefix=''):
    """TestClient for an app mounting Endpoint at <prefix>/endpoint."""
    app = falcon.App(middleware=list(middleware))
    app.add_route(prefix + '/endpoint', Endpoint())
    return falcon.testing.TestClient(app)


def assert_no_cors(result, body=BODY):
    """The response passed through untouched."""
    assert result.status_code == 200
    assert result.text == body
    assert 'Access-Control-Allow-Origin' not in result.headers
    assert 'Access-Control-Allow-Headers' not in result.headers
    assert 'Access-Control-Allow-Methods' not in result.headers


def assert_cors(result, body=BODY, status_code=200):
    """The response carries the CORS headers and the expected body."""
    assert result.status_code == status_code
    assert result.text == body
    assert result.headers['Access-Control-Allow-Origin'] == '*'
    assert result.headers['Access-Control-Allow-Headers'] == ', '.join(ALLOW_HEADERS)
    assert result.headers['Access-Control-Allow-Methods'] == ', '.join(ALLOW_METHODS)
