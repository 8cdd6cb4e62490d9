"""Jira workflow schemes SDK for Python.

This package provides a Python interface to the workflow scheme endpoints of
the Jira REST API (``/rest/api/2/workflowscheme``).

The main entry point is the Jira class.

Example:
```python
    # First set these environment variables:
    # export JIRA_URL="https://your-domain.atlassian.net"
    # export JIRA_USERNAME="you@example.com"
    # export JIRA_API_TOKEN="your_**_token"

    from jira_workflow_schemes import Jira
    sdk = Jira()
    # Fetch a scheme, or its draft when there is one
    sdk.workflow_schemes.retrieve(10100, return_draft_if_exists=True)
```
"""

from ._config import Config
from ._jira import Jira
from ._services import HttpTransport, Transport, WorkflowSchemesService
from ._utils import RequestSpec

__all__ = [
    "Config",
    "HttpTransport",
    "Jira",
    "RequestSpec",
    "Transport",
    "WorkflowSchemesService",
]
