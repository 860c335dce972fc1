"""Main application module"""
import os
import json
import jsend
import sentry_sdk
import falcon
from .components.cors import CORSComponent
from .components.endpoints import parse_endpoints
from .resources.welcome import Welcome

DEFAULT_CORS_ENDPOINTS = 'GET,PUT /welcome'

def start_service(endpoints=None):
    """Start this service
    set SENTRY_DSN environmental variable to enable logging with Sentry
    set CORS_ENDPOINTS (e.g. "GET,PUT /welcome;DELETE /items/:id") to choose
    which endpoints allow CORS, unless endpoints are passed in
    """
    # Initialize Sentry
    sentry_sdk.init(
        os.environ.get('SENTRY_DSN'),
        environment=os.environ.get('environment')
    )
    if endpoints is None:
        endpoints = parse_endpoints(
            os.environ.get('CORS_ENDPOINTS', DEFAULT_CORS_ENDPOINTS))
    # Initialize Falcon
    api = falcon.App(middleware=[CORSComponent(endpoints)])
    api.add_route('/welcome', Welcome())
    api.add_sink(default_error, '/')
    return api

def default_error(_req, resp, **_kwargs):
    """Handle default error"""
    resp.status = falcon.HTTP_404
    msg_error = jsend.error('404 - Not Found')

    sentry_sdk.capture_message(msg_error['message'])
    resp.text = json.dumps(msg_error)
