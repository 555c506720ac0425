from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional
import httpx
from .config import DEFAULT_TIMEOUT, DEFAULT_VERSION, GRAPH_BASE
from .exceptions import (
    FacebookAPIError,
    FacebookTimeoutError,
    FacebookValidationError,
    error_from_body,
    parse_api_error,
)
from .models import BatchResult, Params, Result
from .utils import appsecret_proof, make_params
logger = logging.getLogger("facebook.session")
METHODS = ("GET", "POST", "DELETE", "PUT")
class GraphSession:
    def __init__(
        self,
        access_token: str = "",
        version: str = DEFAULT_VERSION,
        app_secret: str = "",
        enable_appsecret_proof: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        if enable_appsecret_proof and not app_secret:
            raise FacebookValidationError("app_secret", "is required when appsecret_proof is enabled")
        self.access_token = access_token
        self.version = version
        self.app_secret = app_secret
        self.enable_appsecret_proof = enable_appsecret_proof
        self.timeout = timeout
        self.http_client = http_client
    @property
    def headers(self) -> Dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}
    def url(self, path: str) -> str:
        path = path.lstrip("/")
        if self.version:
            return f"{GRAPH_BASE}/{self.version}/{path}"
        return f"{GRAPH_BASE}/{path}"
    def sign(self, params: Optional[Params]) -> Dict[str, str]:
        encoded = make_params(params)
        if self.enable_appsecret_proof and self.access_token:
            encoded["appsecret_proof"] = appsecret_proof(self.access_token, self.app_secret)
        return encoded
    async def api(self, path: str, method: str = "GET", params: Optional[Params] = None) -> Result:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        encoded = self.sign(params)
        logger.debug(f"{method} {path}")
        if method in ("GET", "DELETE"):
            request_kwargs: Dict[str, Any] = {"params": encoded}
        else:
            request_kwargs = {"data": encoded}
        response = await self._send(method, self.url(path), **request_kwargs)
        result = self._decode(response)
        if not isinstance(result, dict):
            return {"data": result}
        return result
    async def get(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.api(path, "GET", params)
    async def post(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.api(path, "POST", params)
    async def delete(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.api(path, "DELETE", params)
    async def put(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.api(path, "PUT", params)
    async def batch(self, batch_params: Optional[Params], *requests: Params) -> List[BatchResult]:
        """
        Send several Graph requests in one POST to the graph root.

        batch_params are forwarded as top-level form fields (access_token,
        attached files and so on); every item of requests is one entry of the
        "batch" array. Results come back in request order.
        """
        if not requests:
            raise FacebookValidationError("batch", "at least one request is required")
        fields = self.sign(batch_params)
        fields["batch"] = json.dumps([dict(r) for r in requests], separators=(",", ":"), default=str)
        logger.debug(f"POST batch of {len(requests)} requests")
        response = await self._send("POST", self._batch_url(), data=fields)
        decoded = self._decode(response)
        if not isinstance(decoded, list):
            raise FacebookAPIError(
                code=response.status_code,
                message="Batch response is not a list",
                status_code=response.status_code,
            )
        results: List[BatchResult] = []
        for item in decoded:
            # null entries mean the request was not run (dependency failed or timed out)
            if item is None:
                results.append(BatchResult(code=0, body=""))
            else:
                results.append(BatchResult.model_validate(item))
        return results
    async def batch_api(self, access_token: str, *requests: Params) -> List[BatchResult]:
        return await self.batch({"access_token": access_token}, *requests)
    async def request(self, request: httpx.Request) -> Result:
        logger.debug(f"{request.method} {request.url}")
        try:
            if self.http_client is not None:
                response = await self.http_client.send(request)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.send(request)
        except httpx.TimeoutException:
            raise FacebookTimeoutError(self.timeout)
        result = self._decode(response)
        if not isinstance(result, dict):
            return {"data": result}
        return result
    def _batch_url(self) -> str:
        return self.url("")
    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            if self.http_client is not None:
                return await self.http_client.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
            async with httpx.AsyncClient() as client:
                return await client.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException:
            logger.info(f"{method} {url} timed out after {self.timeout}s")
            raise FacebookTimeoutError(self.timeout)
    def _decode(self, response: httpx.Response) -> Any:
        if not response.is_success:
            error = parse_api_error(response)
            logger.info(f"Facebook API error: {error.message} (code {error.code})")
            raise error
        try:
            body = response.json()
        except ValueError:
            raise FacebookAPIError(
                code=response.status_code,
                message=f"Invalid JSON in response: {response.text[:500]}",
                status_code=response.status_code,
            )
        if isinstance(body, dict) and "error" in body:
            error = error_from_body(body, response.status_code)
            logger.info(f"Facebook API error: {error.message} (code {error.code})")
            raise error
        return body
