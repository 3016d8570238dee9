"""
Transport of requests to the elasticsearch REST API

Requests are sent through the low level perform_request of the official client,
so authentication, connection pooling and error mapping are handled there.
Errors raised by the client (ApiError, TransportError) are not caught here.

The paths are typed (/<index>/<type>/...), which Elasticsearch 8 only serves in REST API
compatibility mode for version 7, so every request asks for that mode in its headers.
The parent query parameter is only understood by servers that still support _parent mappings.
"""

import logging
from typing import Any, Mapping
from urllib.parse import parse_qsl

from elasticsearch import Elasticsearch

COMPAT_MIMETYPE = "application/vnd.elasticsearch+json; compatible-with=7"
JSON_HEADERS = {"accept": COMPAT_MIMETYPE, "content-type": COMPAT_MIMETYPE}


class Response:
    """A response from the elasticsearch server"""

    def __init__(self, body: Any, status: int = 200):
        self.body = body
        self.status = status

    @classmethod
    def from_api_response(cls, response) -> "Response":
        return cls(response.body, response.meta.status)

    @property
    def treated_content(self) -> dict:
        """The decoded json body, or an empty dict if the server did not send an object"""
        return self.body if isinstance(self.body, dict) else {}

    def __repr__(self):
        return f"<Response {self.status} {self.body!r}>"


def split_query(path: str, arguments: Mapping[str, Any] | None = None) -> tuple[str, dict[str, Any]]:
    """
    Separate a query string embedded in the path from the path itself.
    Explicit arguments take precedence over parameters in the path.
    """
    params: dict[str, Any] = {}
    if "?" in path:
        path, query = path.split("?", 1)
        params.update(parse_qsl(query, keep_blank_values=True))
    if arguments:
        params.update(arguments)
    return path, params


class ElasticTransport:
    def __init__(self, client: Elasticsearch):
        self.client = client

    def request(
        self, method: str, path: str, arguments: Mapping[str, Any] | None = None, body: str | None = None
    ) -> Response:
        """
        Send a request to the server

        :param method: The HTTP method (GET, PUT, POST, DELETE, ...)
        :param path: The absolute path, possibly including a query string
        :param arguments: Additional query parameters
        :param body: The json encoded request body
        :return: the server response
        """
        path, params = split_query(path, arguments)
        headers = dict(JSON_HEADERS) if body is not None else {"accept": JSON_HEADERS["accept"]}
        logging.debug(f"{method} {path} {params or ''}")
        response = self.client.perform_request(method, path, params=params or None, headers=headers, body=body)
        return Response.from_api_response(response)
