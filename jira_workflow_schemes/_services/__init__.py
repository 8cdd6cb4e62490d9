from ._base_service import BaseService, Transport
from ._transport import HttpTransport
from .workflow_schemes_service import WorkflowSchemesService

__all__ = [
    "BaseService",
    "HttpTransport",
    "Transport",
    "WorkflowSchemesService",
]
