"""Helpers for building fake API responses."""

import json

import requests

HOST = "https://pivnet.example.com"
API_PREFIX = "/api/v2"
TOKEN = "my-auth-token"


def build_response(status_code=200, body=None, url=None):
    """Build a real requests.Response carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url or f"{HOST}{API_PREFIX}"
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


def request_kwargs(session, index=-1):
    """Keyword arguments of one recorded session.request call."""
    return session.request.call_args_list[index].kwargs


def url_for(path):
    return f"{HOST}{API_PREFIX}{path}"
