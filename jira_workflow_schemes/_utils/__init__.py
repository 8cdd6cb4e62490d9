from ._logs import setup_logging
from ._request_spec import (
    RequestSpec,
    build_params,
    build_request_spec,
    join_selectors,
)
from ._url import JiraUrl
from ._user_agent import user_agent_value

__all__ = [
    "setup_logging",
    "RequestSpec",
    "build_params",
    "build_request_spec",
    "join_selectors",
    "user_agent_value",
    "JiraUrl",
]
