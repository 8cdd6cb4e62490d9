from typing import Any, List

import pytest

from jira_workflow_schemes import RequestSpec, WorkflowSchemesService
from jira_workflow_schemes._config import Config


class RecordingTransport:
    """Transport double that keeps every spec it is asked to send."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.specs: List[RequestSpec] = []

    def build_url(self, path: str) -> str:
        return path

    def make_request(self, spec: RequestSpec) -> Any:
        self.specs.append(spec)
        return self.result

    async def make_request_async(self, spec: RequestSpec) -> Any:
        self.specs.append(spec)
        return self.result

    @property
    def last(self) -> RequestSpec:
        return self.specs[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(result={"id": 5})


@pytest.fixture
def service(transport: RecordingTransport) -> WorkflowSchemesService:
    return WorkflowSchemesService(transport)


@pytest.fixture
def base_url() -> str:
    return "https://jira.example.com"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url, username="admin", api_token="secret")
