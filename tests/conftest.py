from typing import Any

import pytest

from esmodel.config import get_settings
from esmodel.transfer import Response

INDEX = "esmodel_unittest"
TYPE = "article"


class StubType:
    """
    A type descriptor that records requests instead of sending them.
    Replies with the canned content, or with the result of calling it on (method, path, body)
    """

    def __init__(self, index_name: str = INDEX, name: str = TYPE, reply: Any = None):
        self.index_name = index_name
        self.name = name
        self.reply = reply if reply is not None else {"_id": "42", "_version": 1}
        self.requests: list[tuple] = []

    def request(self, method, path=None, arguments=None, body=None):
        self.requests.append((method, path, arguments, body))
        content = self.reply(method, path, body) if callable(self.reply) else self.reply
        return Response(content)

    @property
    def last_request(self):
        return self.requests[-1]


@pytest.fixture()
def doctype():
    return StubType()


@pytest.fixture()
def parent_settings():
    return {
        "mapping": {
            INDEX: {
                TYPE: {
                    "_parent": {"type": "parentField"},
                    "_source": {"enabled": True},
                },
            },
        },
    }


@pytest.fixture()
def routing_settings():
    return {
        "mapping": {
            INDEX: {
                TYPE: {
                    "_parent": {"type": "parentField"},
                    "_routing": {"path": "region"},
                },
            },
        },
    }


@pytest.fixture(autouse=True)
def clear_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
