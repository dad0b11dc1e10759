from __future__ import annotations

import json
from typing import Any

from ..errors import FetchError
from ..models import AbiBlob, SourceBundle, SourceFile


def parse_abi(result: Any, *, pretty_print: bool) -> AbiBlob:
    if not isinstance(result, str):
        raise FetchError("ABI payload is not a string")
    if not pretty_print:
        return AbiBlob(text=result)
    try:
        abi = json.loads(result)
    except ValueError as exc:
        raise FetchError(f"ABI is not valid JSON: {exc}") from exc
    return AbiBlob(text=json.dumps(abi, indent=2, ensure_ascii=False))


def _load_multi_file_document(source_code: str) -> dict[str, Any] | None:
    """Decode a multi-file submission, or return None for a flat file.

    Standard JSON input submissions are wrapped in an extra pair of braces
    (``{{ ... }}``); older multi-file submissions are a bare ``sources`` map.
    """
    raw = source_code.strip()
    if raw.startswith("{{") and raw.endswith("}}"):
        raw = raw[1:-1]
    elif not (raw.startswith("{") and raw.endswith("}")):
        return None
    try:
        doc = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(doc, dict):
        return None
    if "sources" not in doc:
        doc = {"sources": doc}
    if not isinstance(doc["sources"], dict):
        raise FetchError("multi-file source payload has no usable 'sources' map")
    return doc


def _source_content(path: str, entry: Any) -> str:
    if isinstance(entry, dict) and isinstance(entry.get("content"), str):
        return entry["content"]
    raise FetchError(f"multi-file source entry {path!r} has no content")


def parse_source_bundle(result: Any) -> SourceBundle:
    """Turn a ``getsourcecode`` result into a ``SourceBundle``.

    Multi-file bundles start with a metadata record named after the contract
    whose body is the JSON of every non-``sources`` key (compiler language,
    settings), followed by one entry per source file in upstream order.
    """
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        raise FetchError("unexpected getsourcecode result")
    entry = result[0]
    source_code = str(entry.get("SourceCode") or "")
    contract_name = str(entry.get("ContractName") or "Contract")
    if not source_code.strip():
        raise FetchError("Contract source code not verified")

    doc = _load_multi_file_document(source_code)
    if doc is None:
        return SourceBundle(
            files=(SourceFile(contract_name=contract_name, source_code=source_code),),
            submitted_as_multi_file=False,
        )

    metadata = {k: v for k, v in doc.items() if k != "sources"}
    files = [
        SourceFile(
            contract_name=contract_name,
            source_code=json.dumps(metadata, indent=2, sort_keys=True),
        )
    ]
    for path, item in doc["sources"].items():
        files.append(SourceFile(contract_name=str(path), source_code=_source_content(path, item)))
    return SourceBundle(files=tuple(files), submitted_as_multi_file=True)
