from __future__ import annotations

import json

import httpx
import pytest

from tracpls.bscscan.client import BscScanClient
from tracpls.errors import FetchError
from tracpls.models import Context

CTX = Context(api_key="key-123", api_url="https://api.bscscan.test/api")
ADDRESS = "0x0000000000000000000000000000000000001004"


def _client(payload, calls: list[tuple[str, dict]]) -> BscScanClient:  # type: ignore[no-untyped-def]
    def fake_request(url, params):  # type: ignore[no-untyped-def]
        calls.append((url, params))
        return payload

    return BscScanClient(request_func=fake_request)


def _source_result(source_code: str, name: str = "Vault") -> dict:
    return {
        "status": "1",
        "message": "OK",
        "result": [{"SourceCode": source_code, "ContractName": name, "ABI": "[]"}],
    }


def test_get_abi_pretty_prints_by_default() -> None:
    calls: list[tuple[str, dict]] = []
    client = _client({"status": "1", "message": "OK", "result": '[{"type":"event"}]'}, calls)

    abi = client.get_abi(CTX, ADDRESS)

    assert abi.text == json.dumps([{"type": "event"}], indent=2)
    url, params = calls[0]
    assert url == CTX.api_url
    assert params == {
        "module": "contract",
        "action": "getabi",
        "address": ADDRESS,
        "apikey": "key-123",
    }


def test_get_abi_without_pretty_print_is_verbatim() -> None:
    client = _client({"status": "1", "message": "OK", "result": '[{"type":"event"}]'}, [])
    assert client.get_abi(CTX, ADDRESS, pretty_print=False).text == '[{"type":"event"}]'


def test_upstream_error_message_is_surfaced_verbatim() -> None:
    client = _client(
        {"status": "0", "message": "NOTOK", "result": "Contract source code not verified"}, []
    )
    with pytest.raises(FetchError, match="^Contract source code not verified$"):
        client.get_abi(CTX, ADDRESS)


def test_get_source_single_file() -> None:
    client = _client(_source_result("pragma solidity 0.6.12;\r\ncontract Vault {}"), [])

    bundle = client.get_source(CTX, ADDRESS)

    assert bundle.submitted_as_multi_file is False
    assert [f.contract_name for f in bundle.files] == ["Vault"]
    assert bundle.files[0].source_code.startswith("pragma solidity")


def test_get_source_standard_json_input_puts_metadata_first() -> None:
    doc = {
        "language": "Solidity",
        "sources": {
            "contracts/Vault.sol": {"content": "contract Vault {}"},
            "contracts/lib/Math.sol": {"content": "library Math {}"},
        },
        "settings": {"optimizer": {"enabled": True, "runs": 200}},
    }
    client = _client(_source_result("{" + json.dumps(doc) + "}"), [])

    bundle = client.get_source(CTX, ADDRESS)

    assert bundle.submitted_as_multi_file is True
    assert [f.contract_name for f in bundle.files] == [
        "Vault",
        "contracts/Vault.sol",
        "contracts/lib/Math.sol",
    ]
    metadata = json.loads(bundle.files[0].source_code)
    assert metadata == {"language": "Solidity", "settings": doc["settings"]}
    assert [f.contract_name for f in bundle.rendered_files()] == [
        "contracts/Vault.sol",
        "contracts/lib/Math.sol",
    ]


def test_get_source_bare_sources_map_is_multi_file() -> None:
    sources = {"A.sol": {"content": "contract A {}"}}
    client = _client(_source_result(json.dumps(sources)), [])

    bundle = client.get_source(CTX, ADDRESS)

    assert bundle.submitted_as_multi_file is True
    assert bundle.rendered_files()[0].source_code == "contract A {}"


def test_get_source_unverified_contract_fails() -> None:
    client = _client(_source_result(""), [])
    with pytest.raises(FetchError, match="not verified"):
        client.get_source(CTX, ADDRESS)


def test_transport_errors_become_fetch_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, request=request)

    with BscScanClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchError):
            client.get_abi(CTX, ADDRESS)


def test_undecodable_body_becomes_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["apikey"] == "key-123"
        return httpx.Response(200, text="<html>maintenance</html>", request=request)

    with BscScanClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchError, match="invalid JSON"):
            client.get_source(CTX, ADDRESS)


def test_pretty_printed_abi_keeps_non_ascii_text() -> None:
    result = json.dumps([{"type": "function", "name": "café"}])
    client = _client({"status": "1", "message": "OK", "result": result}, [])

    text = client.get_abi(CTX, ADDRESS).text

    assert '"café"' in text
    assert "\\u00e9" not in text
