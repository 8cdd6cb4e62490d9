from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WorkflowScheme(BaseModel):
    """A workflow scheme, or a draft of one.

    Only the attributes that are set are sent to Jira; values left as ``None``
    are assumed to be unchanged (or defaulted, on creation).
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    id: Optional[int] = Field(default=None, alias="id")
    name: Optional[str] = Field(default=None, alias="name")
    description: Optional[str] = Field(default=None, alias="description")
    default_workflow: Optional[str] = Field(default=None, alias="defaultWorkflow")
    issue_type_mappings: Optional[Dict[str, str]] = Field(
        default=None, alias="issueTypeMappings"
    )
    draft: Optional[bool] = Field(default=None, alias="draft")
    update_draft_if_needed: Optional[bool] = Field(
        default=None, alias="updateDraftIfNeeded"
    )
    self_url: Optional[str] = Field(default=None, alias="self")


class DefaultWorkflow(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )

    workflow: Optional[str] = Field(default=None, alias="workflow")
    update_draft_if_needed: Optional[bool] = Field(
        default=None, alias="updateDraftIfNeeded"
    )


WorkflowSchemePayload = Union[WorkflowScheme, Mapping[str, Any]]


def dump_payload(payload: Optional[Union[BaseModel, Mapping[str, Any]]]) -> Dict[str, Any]:
    """Turns a request payload into the JSON object sent to Jira."""
    if payload is None:
        return {}
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True)
    return dict(payload)
