"""
Tests for the HTTP surface: routes, error mapping and shared engine state.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from wordtok.api import create_app
from wordtok.data.vocabs import VocabEngine


@pytest.fixture
def engine():
    return VocabEngine()


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))


def test_encode_then_decode(client):
    res = client.post("/encode", json={"text": "hello world"})
    assert res.status_code == 200
    assert res.json() == {"tokens": [4, 5]}

    res = client.post("/decode", json={"tokens": [4, 5, 99]})
    assert res.status_code == 200
    assert res.json() == {"text": "hello world <UNK>"}


def test_requests_share_the_engine(client, engine):
    client.post("/encode", json={"text": "a b a"})
    assert engine.token_to_id("a") == 4
    assert engine.is_trained


@pytest.mark.parametrize("body", [{}, {"text": 5}, {"text": None}, {"text": ["a"]}])
def test_encode_rejects_malformed_body(client, body):
    res = client.post("/encode", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Text is required"}


def test_encode_rejects_blank_text(client, engine):
    res = client.post("/encode", json={"text": "   "})
    assert res.status_code == 400
    assert res.json() == {"error": "Text cannot be empty"}
    assert len(engine) == 4


@pytest.mark.parametrize("body", [{}, {"tokens": "4"}, {"tokens": [4, "x"]}, {"tokens": [1.5]}])
def test_decode_rejects_malformed_body(client, body):
    res = client.post("/decode", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Tokens array is required"}


def test_decode_rejects_empty_array(client):
    client.post("/encode", json={"text": "hello"})
    res = client.post("/decode", json={"tokens": []})
    assert res.status_code == 400
    assert res.json() == {"error": "Tokens array cannot be empty"}


def test_decode_before_encode(client):
    res = client.post("/decode", json={"tokens": [4]})
    assert res.status_code == 400
    assert "not been trained" in res.json()["error"]


def test_reset(client, engine):
    client.post("/encode", json={"text": "hello"})
    res = client.post("/reset")
    assert res.status_code == 200
    assert res.json() == {"message": "Tokenizer reset successfully"}
    assert not engine.is_trained
    assert client.post("/decode", json={"tokens": [4]}).status_code == 400


def test_vocabulary_snapshot(client):
    client.post("/encode", json={"text": "b a b"})
    res = client.get("/vocabulary")
    assert res.status_code == 200
    body = res.json()
    assert body["size"] == 6
    assert body["trained"] is True
    assert body["entries"][-2:] == [{"word": "b", "id": 4}, {"word": "a", "id": 5}]


def test_unknown_route(client):
    res = client.get("/missing")
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found", "path": "/missing", "method": "GET"}


def test_wrong_method_is_route_not_found(client):
    res = client.get("/encode")
    assert res.status_code == 404
    assert res.json()["method"] == "GET"


def test_unexpected_failure_maps_to_500(engine, monkeypatch):
    def boom(text, extend=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, "encode", boom)
    client = TestClient(create_app(engine))
    res = client.post("/encode", json={"text": "hello"})
    assert res.status_code == 500
    assert res.json() == {"error": "boom"}


def test_train_route_teaches_frozen_engine():
    frozen = VocabEngine(extend_on_encode=False)
    client = TestClient(create_app(frozen))
    assert client.post("/encode", json={"text": "hello world"}).json() == {"tokens": [1, 1]}

    res = client.post("/train", json={"text": "world hello world"})
    assert res.status_code == 200
    assert res.json() == {"added": ["world", "hello"], "size": 6}

    assert client.post("/encode", json={"text": "hello world"}).json() == {"tokens": [5, 4]}
    assert client.post("/decode", json={"tokens": [4]}).json() == {"text": "world"}


@pytest.mark.parametrize("body", [{}, {"text": 3}, {"text": ["a"]}])
def test_train_rejects_malformed_body(client, body):
    res = client.post("/train", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Text is required"}


def test_train_rejects_blank_text(client, engine):
    res = client.post("/train", json={"text": " \n "})
    assert res.status_code == 400
    assert res.json() == {"error": "Text cannot be empty"}
    assert not engine.is_trained


@pytest.mark.parametrize("method, path, attr", [
    ("post", "/reset", "reset"),
    ("get", "/vocabulary", "snapshot"),
])
def test_unexpected_failure_on_state_routes_maps_to_500(engine, monkeypatch, method, path, attr):
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, attr, boom)
    client = TestClient(create_app(engine))
    res = getattr(client, method)(path)
    assert res.status_code == 500
    assert res.json() == {"error": "boom"}
