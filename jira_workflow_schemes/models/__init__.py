from .errors import BaseUrlMissingError, CredentialsMissingError
from .exceptions import EnrichedException
from .workflow_schemes import (
    DefaultWorkflow,
    WorkflowScheme,
    WorkflowSchemePayload,
    dump_payload,
)

__all__ = [
    "BaseUrlMissingError",
    "CredentialsMissingError",
    "DefaultWorkflow",
    "EnrichedException",
    "WorkflowScheme",
    "WorkflowSchemePayload",
    "dump_payload",
]
