import json
import sys
from unittest import mock

import pytest
from elasticsearch import NotFoundError

from esmodel import __main__ as cli


@pytest.fixture()
def client(monkeypatch, tmp_path):
    monkeypatch.setenv("ESMODEL_ENV_FILE", str(tmp_path / "does_not_exist.env"))
    monkeypatch.delenv("ESMODEL_MAPPING_FILE", raising=False)
    client = mock.Mock()
    monkeypatch.setattr(cli, "elastic_connection", lambda: client)
    return client


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["esmodel", *args])
    cli.main()


def test_store(monkeypatch, client, capsys):
    client.perform_request.return_value = mock.Mock(body={"_id": "abc", "_version": 1}, meta=mock.Mock(status=201))
    run(monkeypatch, "store", "news", "article", '{"title": "t"}')
    assert client.perform_request.call_args[0] == ("POST", "/news/article")
    assert "id=abc version=1" in capsys.readouterr().out


def test_put_mapping(monkeypatch, client, capsys):
    client.perform_request.return_value = mock.Mock(body={"acknowledged": True}, meta=mock.Mock(status=200))
    run(monkeypatch, "put-mapping", "news", "article", "--properties", '{"title": {"type": "text"}}')
    args, kwargs = client.perform_request.call_args
    assert args == ("PUT", "/news/article/_mapping")
    assert json.loads(kwargs["body"]) == {
        "article": {"dynamic_templates": [], "properties": {"title": {"type": "text"}}}
    }
    assert json.loads(capsys.readouterr().out) == {"acknowledged": True}


def test_get_missing(monkeypatch, client):
    client.perform_request.side_effect = NotFoundError("not found", mock.Mock(status=404), {"found": False})
    with pytest.raises(SystemExit) as e:
        run(monkeypatch, "get", "news", "article", "nope")
    assert e.value.code == 1


def test_update(monkeypatch, client, capsys):
    client.perform_request.return_value = mock.Mock(body={"_id": "abc", "_version": 2}, meta=mock.Mock(status=200))
    run(monkeypatch, "update", "news", "article", "abc", '{"title": "new"}')
    args, kwargs = client.perform_request.call_args
    assert args == ("POST", "/news/article/abc/_update")
    assert json.loads(kwargs["body"]) == {"title": "new"}
    assert "id=abc version=2" in capsys.readouterr().out


def test_config(monkeypatch, client, capsys):
    monkeypatch.delenv("ESMODEL_LOG_LEVEL", raising=False)
    monkeypatch.setenv("ESMODEL_ELASTIC_HOST", "http://elastic:9200")
    run(monkeypatch, "config")
    out = capsys.readouterr().out
    assert "ESMODEL_ELASTIC_HOST=http://elastic:9200" in out
    assert "ESMODEL_LOG_LEVEL=INFO" in out
    client.perform_request.assert_not_called()
