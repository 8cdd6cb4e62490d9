import base64
from logging import getLogger
from typing import Any

from httpx import (
    AsyncClient,
    Client,
    ConnectTimeout,
    Headers,
    HTTPStatusError,
    Response,
    TimeoutException,
)
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils import JiraUrl, RequestSpec, user_agent_value
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_USER_AGENT
from ..models.exceptions import EnrichedException


def is_retryable_exception(exception: BaseException) -> bool:
    if isinstance(exception, EnrichedException):
        return exception.status_code is not None and 500 <= exception.status_code < 600
    return isinstance(exception, (ConnectTimeout, TimeoutException))


_retry_transient = retry(
    retry=retry_if_exception(is_retryable_exception),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    stop=stop_after_attempt(3),
    reraise=True,
)


class HttpTransport:
    """Default transport executing request specs against a Jira instance with httpx.

    Connect timeouts, read timeouts and 5xx responses are retried with an
    exponential backoff; any other non-2xx response raises `EnrichedException`.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger("jira_workflow_schemes")
        self._config = config
        self._url = JiraUrl(config.base_url, config.api_version)

        default_client_kwargs = get_httpx_client_kwargs(config.timeout)

        client_kwargs = {
            **default_client_kwargs,  # SSL, timeout, redirects
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

    def build_url(self, path: str) -> str:
        return self._url.build_url(path)

    @_retry_transient
    def make_request(self, spec: RequestSpec) -> Any:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"PARAMS: {dict(spec.params)}")

        response = self._client.request(
            spec.method,
            spec.url,
            params=dict(spec.params),
            json=spec.json,
            headers=self._request_headers(spec),
            follow_redirects=spec.follow_redirects,
        )

        return self._handle_response(response, spec)

    @_retry_transient
    async def make_request_async(self, spec: RequestSpec) -> Any:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"PARAMS: {dict(spec.params)}")

        response = await self._client_async.request(
            spec.method,
            spec.url,
            params=dict(spec.params),
            json=spec.json,
            headers=self._request_headers(spec),
            follow_redirects=spec.follow_redirects,
        )

        return self._handle_response(response, spec)

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        if self._config.username:
            credentials = f"{self._config.username}:{self._config.api_token}"
            token = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
            return {"Authorization": f"Basic {token}"}

        return {"Authorization": f"Bearer {self._config.api_token}"}

    def _request_headers(self, spec: RequestSpec) -> dict[str, str]:
        return {
            **spec.headers,
            HEADER_USER_AGENT: user_agent_value(type(self).__name__),
        }

    def _handle_response(self, response: Response, spec: RequestSpec) -> Any:
        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            raise EnrichedException(e) from e

        if not response.content:
            return None
        if spec.json_encoded:
            return response.json()
        return response.text

    def __repr__(self) -> str:
        return f"HttpTransport({self._url!r})"
