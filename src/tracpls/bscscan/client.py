from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import httpx

from ..errors import FetchError
from ..models import AbiBlob, Context, SourceBundle
from .parse import parse_abi, parse_source_bundle


@dataclass(frozen=True)
class BscScanResponse:
    status: str
    message: str
    result: Any


RequestFunc = Callable[[str, dict[str, str]], Any]


class BscScanClient:
    """Blocking client for the ``contract`` module of a BscScan-style API.

    One request per call and no retries: the first failure surfaces as a
    ``FetchError`` carrying the upstream message.
    """

    def __init__(
        self,
        request_func: RequestFunc | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._request_func = request_func
        self._client: httpx.Client | None = None
        if request_func is None:
            self._client = httpx.Client(
                headers={"User-Agent": "tracpls"},
                timeout=timeout,
                transport=transport,
            )

    def __enter__(self) -> "BscScanClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    def request(self, ctx: Context, params: dict[str, str]) -> BscScanResponse:
        query = {**params, "apikey": ctx.api_key}
        payload = self._request(ctx.api_url, query)
        if not isinstance(payload, dict):
            raise FetchError(f"unexpected response from {ctx.api_url}")
        response = BscScanResponse(
            status=str(payload.get("status") or ""),
            message=str(payload.get("message") or ""),
            result=payload.get("result"),
        )
        if response.status != "1":
            detail = response.result if isinstance(response.result, str) else None
            raise FetchError(detail or response.message or "request failed")
        return response

    def _request(self, url: str, params: dict[str, str]) -> Any:
        if self._request_func is not None:
            return self._request_func(url, params)

        if self._client is None:
            raise RuntimeError("HTTP client not initialized")
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            raise FetchError(str(exc)) from exc
        except ValueError as exc:
            raise FetchError(f"invalid JSON in response from {url}") from exc

    def get_abi(self, ctx: Context, address: str, pretty_print: bool = True) -> AbiBlob:
        response = self.request(
            ctx, {"module": "contract", "action": "getabi", "address": address}
        )
        return parse_abi(response.result, pretty_print=pretty_print)

    def get_source(self, ctx: Context, address: str) -> SourceBundle:
        response = self.request(
            ctx, {"module": "contract", "action": "getsourcecode", "address": address}
        )
        return parse_source_bundle(response.result)
