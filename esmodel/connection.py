"""
Sets up the connection to the Elastic server.
The connection is created on first use and cached, so multiple calls return the same client.
"""

import functools
import logging

from elasticsearch import Elasticsearch

from esmodel.config import get_settings


class CannotConnectElastic(Exception):
    pass


@functools.lru_cache()
def elastic_connection() -> Elasticsearch:
    try:
        return _setup_elastic()
    except CannotConnectElastic:
        raise
    except Exception as e:
        raise CannotConnectElastic(f"Cannot connect to elastic {get_settings().elastic_host!r}: {e}") from e


def _connect_elastic() -> Elasticsearch:
    """
    Connect to the elastic server using the system settings
    """
    settings = get_settings()
    if settings.elastic_password:
        return Elasticsearch(
            settings.elastic_host,
            basic_auth=("elastic", settings.elastic_password),
            verify_certs=bool(settings.elastic_verify_ssl),
        )
    else:
        return Elasticsearch(settings.elastic_host)


def _setup_elastic() -> Elasticsearch:
    """
    Check whether we can connect with elastic
    """
    settings = get_settings()
    logging.debug(
        f"Connecting with elasticsearch at {settings.elastic_host}, "
        f"password? {'yes' if settings.elastic_password else 'no'} "
    )
    elastic = _connect_elastic()
    if not elastic.ping():
        raise CannotConnectElastic(f"Cannot connect to elasticsearch server {settings.elastic_host}")
    return elastic
