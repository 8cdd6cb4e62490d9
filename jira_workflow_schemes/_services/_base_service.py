from logging import getLogger
from typing import Any, Protocol, runtime_checkable

from .._utils import RequestSpec


@runtime_checkable
class Transport(Protocol):
    """What a service needs from the layer that talks HTTP.

    ``build_url`` resolves a path relative to the REST API root. The request
    methods execute a spec and either return the decoded result or raise,
    exactly once per call.
    """

    def build_url(self, path: str) -> str: ...

    def make_request(self, spec: RequestSpec) -> Any: ...

    async def make_request_async(self, spec: RequestSpec) -> Any: ...


class BaseService:
    def __init__(self, transport: Transport) -> None:
        self._logger = getLogger("jira_workflow_schemes")
        self._transport = transport

        super().__init__()

    def request(self, spec: RequestSpec) -> Any:
        self._logger.debug(f"Spec: {spec.method} {spec.endpoint} {dict(spec.params)}")
        return self._transport.make_request(spec)

    async def request_async(self, spec: RequestSpec) -> Any:
        self._logger.debug(f"Spec: {spec.method} {spec.endpoint} {dict(spec.params)}")
        return await self._transport.make_request_async(spec)
