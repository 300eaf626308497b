"""Tests for the web service."""

import json

import pytest

from genesis_alpha.config import ServiceConfig
from genesis_alpha.crypto import generate_keypair, pub_key_to_json
from genesis_alpha.web import create_app


def validator_form(pub_key_json, power="10", name="v1"):
    return {
        "validator_pubkey": pub_key_json,
        "validator_power": power,
        "validator_name": name,
    }


def test_index_empty(client):
    """Test the list page with no genesis files."""
    response = client.get("/")
    assert response.status_code == 200
    assert b"No genesis files" in response.data


def test_new_form(client):
    """Test the new genesis form."""
    response = client.get("/new")
    assert response.status_code == 200
    assert b'name="chainID"' in response.data


def test_create_without_validator(client, registry):
    """Test creating a genesis file with no validator."""
    response = client.post("/create", data={"chainID": "testnet"})

    assert response.status_code == 200
    assert b"/new_validator/testnet" in response.data
    assert b"/view/testnet" in response.data
    assert registry.get("testnet").validators == []

    assert b"testnet" in client.get("/").data


def test_create_with_everything(client, registry, pub_key_json):
    """Test creating a genesis file with a validator, app hash and app state."""
    form = {"chainID": "testnet", "app_hash": "cafe", "app_state": '{"a": 1}'}
    form.update(validator_form(pub_key_json, "5", "alice"))

    response = client.post("/create", data=form)

    assert response.status_code == 200
    genesis = registry.get("testnet")
    assert [(v.name, v.power) for v in genesis.validators] == [("alice", 5)]
    assert genesis.app_hash == b"\xca\xfe"
    assert genesis.app_state == '{"a": 1}'


@pytest.mark.parametrize("form,message", [
    ({"chainID": ""}, b"chainID is required"),
    ({"chainID": "bad id"}, b"invalid chainID"),
    ({"chainID": "testnet", "validator_power": "5"}, b"incorrect validator fields"),
    ({"chainID": "testnet", "app_hash": "xyz"}, b"app_hash must be hex-encoded"),
    ({"chainID": "", "validator_power": "5"}, b"chainID is required"),
    ({"chainID": "bad id", "validator_pubkey": "{bad json"}, b"invalid chainID"),
    ({"chainID": "testnet", "validator_power": "9" * 5000, "validator_pubkey": "k", "validator_name": "n"},
     b"failed to parse power"),
])
def test_create_rejected(client, registry, form, message):
    """Test that bad create input is a 406 and creates nothing."""
    response = client.post("/create", data=form)

    assert response.status_code == 406
    assert message in response.data
    assert registry.list() == []


def test_create_existing_chain(client):
    """Test that creating an existing chain is a 406."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.post("/create", data={"chainID": "testnet"})

    assert response.status_code == 406
    assert b"chain already exists" in response.data


def test_create_existing_chain_reported_before_validator(client, registry):
    """Test that an existing chain is reported before bad validator fields."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.post("/create", data={"chainID": "testnet", "validator_power": "5"})

    assert response.status_code == 406
    assert response.data == b"chain already exists"
    assert registry.get("testnet").validators == []


def test_new_validator_form(client):
    """Test the add-validator form."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.get("/new_validator/testnet")

    assert response.status_code == 200
    assert b"/add_validator/testnet" in response.data
    assert b"0 validators have checked in so far" in response.data


def test_new_validator_unknown_chain(client):
    """Test the add-validator form for an unknown chain."""
    response = client.get("/new_validator/nope")

    assert response.status_code == 404
    assert response.data == b"genesis with such chain ID nope not found"


def test_add_validator_redirects_to_view(client, registry, pub_key_json):
    """Test that adding a validator redirects to the JSON view."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.post("/add_validator/testnet", data=validator_form(pub_key_json))

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/view/testnet")
    assert [v.name for v in registry.get("testnet").validators] == ["v1"]


def test_add_validators_sorted(client):
    """Test that the served validator set is sorted by power."""
    client.post("/create", data={"chainID": "testnet"})
    for power, name in [("10", "v1"), ("20", "v2")]:
        key = pub_key_to_json(generate_keypair().pub_key)
        client.post("/add_validator/testnet", data=validator_form(key, power, name))

    data = json.loads(client.get("/view/testnet").data)

    assert [(v["name"], v["power"]) for v in data["validators"]] == [("v2", "20"), ("v1", "10")]


def test_add_validator_unknown_chain(client, pub_key_json):
    """Test adding a validator to an unknown chain."""
    response = client.post("/add_validator/nope", data=validator_form(pub_key_json))
    assert response.status_code == 404


def test_add_validator_unknown_chain_with_bad_input(client):
    """Test that a missing chain is reported before bad input."""
    response = client.post("/add_validator/nope", data={})
    assert response.status_code == 404


@pytest.mark.parametrize("form,message", [
    ({}, b"incorrect validator fields"),
    ({"validator_power": "-1"}, b"power can't be negative"),
    ({"validator_power": "abc"}, b"failed to parse power"),
    ({"validator_power": "9" * 5000}, b"failed to parse power"),
    ({"validator_pubkey": "{bad json"}, b"failed to parse pub_key"),
])
def test_add_validator_rejected(client, registry, pub_key_json, form, message):
    """Test that bad validator input is a 406 and adds nothing."""
    client.post("/create", data={"chainID": "testnet"})
    data = validator_form(pub_key_json) if form else {}
    data.update(form)

    response = client.post("/add_validator/testnet", data=data)

    assert response.status_code == 406
    assert message in response.data
    assert registry.get("testnet").validators == []


def test_view(client):
    """Test the JSON view."""
    client.post("/create", data={"chainID": "testnet"})

    first = client.get("/view/testnet")
    second = client.get("/view/testnet")

    assert first.status_code == 200
    assert first.mimetype == "application/json"
    assert "Content-Disposition" not in first.headers
    assert json.loads(first.data)["chain_id"] == "testnet"
    assert first.data == second.data


def test_download(client):
    """Test the JSON download."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.get("/download/testnet")

    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.headers["Content-Disposition"].startswith("attachment")
    assert response.data == client.get("/view/testnet").data


@pytest.mark.parametrize("path", ["/view/nope", "/download/nope"])
def test_view_unknown_chain(client, path):
    """Test viewing an unknown chain."""
    response = client.get(path)

    assert response.status_code == 404
    assert response.data == b"genesis with such chain ID nope not found"


def test_invalid_path_chain_id(client):
    """Test that a malformed chain ID in the path is a 404."""
    assert client.get("/view/bad@id").status_code == 404


def test_view_broken_app_state(client):
    """Test that an unserializable app state is a 500."""
    client.post("/create", data={"chainID": "testnet", "app_state": "{broken"})

    response = client.get("/view/testnet")

    assert response.status_code == 500


def test_view_non_finite_app_state(client):
    """Test that NaN in the app state is a 500, not invalid JSON."""
    client.post("/create", data={"chainID": "testnet", "app_state": '{"x": NaN}'})

    response = client.get("/view/testnet")

    assert response.status_code == 500
    assert b"NaN is not valid JSON" in response.data


def test_health(client):
    """Test health check endpoint."""
    client.post("/create", data={"chainID": "testnet"})

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "chains": 1}


def test_create_app_rejecting_duplicate_keys(pub_key_json):
    """Test an app configured to reject duplicate keys."""
    app = create_app(ServiceConfig(allow_duplicate_pub_keys=False))
    client = app.test_client()
    form = {"chainID": "testnet"}
    form.update(validator_form(pub_key_json))
    client.post("/create", data=form)

    response = client.post("/add_validator/testnet", data=validator_form(pub_key_json, "3", "again"))

    assert response.status_code == 406
    assert b"pub_key already exists" in response.data
