"""
HTTP fakes for registry client tests.

Real requests.Response objects with canned bodies, so the client's
raise_for_status()/json() handling runs unchanged.
"""

import json

import requests

SERVER_URL = "http://registry.test:8080"


def make_response(body=None, status_code=200, raw=None):
    """
    Build a requests.Response carrying a JSON body.

    Args:
        body: Object to JSON-encode (ignored if raw is given)
        status_code: HTTP status
        raw: Exact bytes for the body
    """
    response = requests.Response()
    response.status_code = status_code
    response.url = SERVER_URL
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response
