from typing import Any, Optional, Sequence, Union

from .._utils import RequestSpec, build_request_spec
from .._utils.constants import (
    QUERY_RETURN_DRAFT_IF_EXISTS,
    QUERY_UPDATE_DRAFT_IF_NEEDED,
)
from ..models import DefaultWorkflow, WorkflowSchemePayload, dump_payload
from ..tracing import traced
from ._base_service import BaseService, Transport

WorkflowSchemeId = Union[int, str]
Selectors = Optional[Sequence[str]]


class WorkflowSchemesService(BaseService):
    """Service for managing Jira workflow schemes.

    Workflow schemes map issue types to workflows. A scheme that is in use by a
    project cannot be edited directly; changes go to its draft instead, which
    is published from the Jira administration UI.

    Every method builds a single request against
    ``/workflowscheme/{workflow_scheme_id}`` and hands it to the transport.
    Nothing is validated here; Jira rejects malformed identifiers.
    """

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport=transport)
        self._base_url = "/workflowscheme"

    @traced(name="workflow_schemes_create", run_type="jira", hide_input=True)
    def create(self, workflow_scheme: Optional[WorkflowSchemePayload] = None) -> Any:
        """Create a new workflow scheme.

        Values not passed are assumed to be set to their defaults.

        Args:
            workflow_scheme (Optional[WorkflowSchemePayload]): The new scheme, either a
                `WorkflowScheme` or a mapping in Jira's JSON shape.

        Returns:
            Any: The created workflow scheme, as decoded by the transport.

        Examples:
            ```python
            from jira_workflow_schemes import Jira
            from jira_workflow_schemes.models import WorkflowScheme

            client = Jira()

            client.workflow_schemes.create(
                WorkflowScheme(
                    name="Software scheme",
                    default_workflow="jira",
                    issue_type_mappings={"10001": "builds workflow"},
                )
            )
            ```
        """
        return self.request(self._create_spec(workflow_scheme))

    @traced(name="workflow_schemes_create", run_type="jira", hide_input=True)
    async def create_async(
        self, workflow_scheme: Optional[WorkflowSchemePayload] = None
    ) -> Any:
        """Asynchronously create a new workflow scheme.

        Args:
            workflow_scheme (Optional[WorkflowSchemePayload]): The new scheme.

        Returns:
            Any: The created workflow scheme.
        """
        return await self.request_async(self._create_spec(workflow_scheme))

    @traced(name="workflow_schemes_edit", run_type="jira", hide_input=True)
    def edit(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_scheme: Optional[WorkflowSchemePayload] = None,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Update a workflow scheme.

        Values not passed are assumed to indicate no change for that field. Set
        `update_draft_if_needed` on the payload to have Jira create or update the
        draft when the scheme itself cannot be edited (e.g. when it is used by a
        project).

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            workflow_scheme (Optional[WorkflowSchemePayload]): The attributes to change.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The updated workflow scheme, or its draft.
        """
        return self.request(
            self._edit_spec(
                workflow_scheme_id, workflow_scheme, fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_edit", run_type="jira", hide_input=True)
    async def edit_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_scheme: Optional[WorkflowSchemePayload] = None,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously update a workflow scheme."""
        return await self.request_async(
            self._edit_spec(
                workflow_scheme_id, workflow_scheme, fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_retrieve", run_type="jira")
    def retrieve(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Retrieve a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            return_draft_if_exists (Optional[bool]): When True, the scheme's draft is
                returned instead of the scheme itself, if a draft exists.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The workflow scheme.

        Examples:
            ```python
            from jira_workflow_schemes import Jira

            client = Jira()

            client.workflow_schemes.retrieve(10100, return_draft_if_exists=True)
            ```
        """
        return self.request(
            self._retrieve_spec(
                workflow_scheme_id,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_retrieve", run_type="jira")
    async def retrieve_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously retrieve a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            return_draft_if_exists (Optional[bool]): When True, return the draft if one exists.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The workflow scheme.
        """
        return await self.request_async(
            self._retrieve_spec(
                workflow_scheme_id,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_create_draft", run_type="jira")
    def create_draft(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Create a draft of a workflow scheme.

        The draft starts as a copy of the current state of its parent scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The new draft.
        """
        return self.request(
            self._create_draft_spec(workflow_scheme_id, fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_create_draft", run_type="jira")
    async def create_draft_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously create a draft of a workflow scheme."""
        return await self.request_async(
            self._create_draft_spec(workflow_scheme_id, fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_retrieve_default_workflow", run_type="jira")
    def retrieve_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Retrieve the default workflow of a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            return_draft_if_exists (Optional[bool]): When True, the draft's default
                workflow is returned instead, if a draft exists.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The default workflow.
        """
        return self.request(
            self._retrieve_default_workflow_spec(
                workflow_scheme_id,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_retrieve_default_workflow", run_type="jira")
    async def retrieve_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously retrieve the default workflow of a workflow scheme."""
        return await self.request_async(
            self._retrieve_default_workflow_spec(
                workflow_scheme_id,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_remove_default_workflow", run_type="jira")
    def remove_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Remove the default workflow from a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            update_draft_if_needed (Optional[bool]): When True, a draft is created and
                changed instead when the scheme cannot be edited (e.g. when it is used
                by a project).
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The workflow scheme, or its draft.
        """
        return self.request(
            self._remove_default_workflow_spec(
                workflow_scheme_id,
                update_draft_if_needed=update_draft_if_needed,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_remove_default_workflow", run_type="jira")
    async def remove_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously remove the default workflow from a workflow scheme."""
        return await self.request_async(
            self._remove_default_workflow_spec(
                workflow_scheme_id,
                update_draft_if_needed=update_draft_if_needed,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_set_default_workflow", run_type="jira")
    def set_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_name: Optional[str] = None,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Set the default workflow of a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            workflow_name (Optional[str]): The name of the new default workflow.
            update_draft_if_needed (Optional[bool]): When True, a draft is created and
                changed instead when the scheme cannot be edited.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The workflow scheme, or its draft.

        Examples:
            ```python
            from jira_workflow_schemes import Jira

            client = Jira()

            client.workflow_schemes.set_default_workflow(
                10100, "Software workflow", update_draft_if_needed=True
            )
            ```
        """
        return self.request(
            self._set_default_workflow_spec(
                workflow_scheme_id,
                workflow_name,
                update_draft_if_needed=update_draft_if_needed,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_set_default_workflow", run_type="jira")
    async def set_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_name: Optional[str] = None,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously set the default workflow of a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            workflow_name (Optional[str]): The name of the new default workflow.
            update_draft_if_needed (Optional[bool]): When True, change a draft if the scheme is in use.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The workflow scheme, or its draft.
        """
        return await self.request_async(
            self._set_default_workflow_spec(
                workflow_scheme_id,
                workflow_name,
                update_draft_if_needed=update_draft_if_needed,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_retrieve_draft", run_type="jira")
    def retrieve_draft(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Retrieve the draft of a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The draft.
        """
        return self.request(
            self._draft_spec(workflow_scheme_id, "GET", fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_retrieve_draft", run_type="jira")
    async def retrieve_draft_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously retrieve the draft of a workflow scheme."""
        return await self.request_async(
            self._draft_spec(workflow_scheme_id, "GET", fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_edit_draft", run_type="jira", hide_input=True)
    def edit_draft(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        draft: Optional[WorkflowSchemePayload] = None,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Update the draft of a workflow scheme, creating it if necessary.

        Values not passed are assumed to indicate no change for that field.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            draft (Optional[WorkflowSchemePayload]): The attributes to change.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The updated draft.
        """
        return self.request(
            self._draft_spec(
                workflow_scheme_id,
                "PUT",
                body=dump_payload(draft),
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_edit_draft", run_type="jira", hide_input=True)
    async def edit_draft_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        draft: Optional[WorkflowSchemePayload] = None,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously update the draft of a workflow scheme."""
        return await self.request_async(
            self._draft_spec(
                workflow_scheme_id,
                "PUT",
                body=dump_payload(draft),
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_delete_draft", run_type="jira")
    def delete_draft(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Delete the draft of a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: Whatever Jira answers, usually nothing.
        """
        return self.request(
            self._draft_spec(workflow_scheme_id, "DELETE", fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_delete_draft", run_type="jira")
    async def delete_draft_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously delete the draft of a workflow scheme."""
        return await self.request_async(
            self._draft_spec(workflow_scheme_id, "DELETE", fields=fields, expand=expand)
        )

    @traced(name="workflow_schemes_retrieve_draft_default_workflow", run_type="jira")
    def retrieve_draft_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Retrieve the default workflow of a workflow scheme's draft.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The draft's default workflow.
        """
        return self.request(
            self._draft_default_workflow_spec(
                workflow_scheme_id, "GET", fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_retrieve_draft_default_workflow", run_type="jira")
    async def retrieve_draft_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously retrieve the default workflow of a workflow scheme's draft."""
        return await self.request_async(
            self._draft_default_workflow_spec(
                workflow_scheme_id, "GET", fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_set_draft_default_workflow", run_type="jira")
    def set_draft_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_name: Optional[str] = None,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Set the default workflow of a workflow scheme's draft.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            workflow_name (Optional[str]): The name of the new default workflow.
            update_draft_if_needed (Optional[bool]): Forwarded to Jira in the request body.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The updated draft.
        """
        return self.request(
            self._draft_default_workflow_spec(
                workflow_scheme_id,
                "PUT",
                body=_default_workflow_body(workflow_name, update_draft_if_needed),
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_set_draft_default_workflow", run_type="jira")
    async def set_draft_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_name: Optional[str] = None,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously set the default workflow of a workflow scheme's draft."""
        return await self.request_async(
            self._draft_default_workflow_spec(
                workflow_scheme_id,
                "PUT",
                body=_default_workflow_body(workflow_name, update_draft_if_needed),
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_remove_draft_default_workflow", run_type="jira")
    def remove_draft_default_workflow(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Remove the default workflow from a workflow scheme's draft.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the parent workflow scheme.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The updated draft.
        """
        return self.request(
            self._draft_default_workflow_spec(
                workflow_scheme_id, "DELETE", fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_remove_draft_default_workflow", run_type="jira")
    async def remove_draft_default_workflow_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously remove the default workflow from a workflow scheme's draft."""
        return await self.request_async(
            self._draft_default_workflow_spec(
                workflow_scheme_id, "DELETE", fields=fields, expand=expand
            )
        )

    @traced(name="workflow_schemes_retrieve_issue_type", run_type="jira")
    def retrieve_issue_type(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        issue_type: Union[int, str],
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Retrieve the workflow mapped to an issue type in a workflow scheme.

        Args:
            workflow_scheme_id (WorkflowSchemeId): The ID of the workflow scheme.
            issue_type (Union[int, str]): The issue type.
            return_draft_if_exists (Optional[bool]): When True, the draft's mapping is
                returned instead, if a draft exists.
            fields (Optional[Sequence[str]]): The fields to include in the response.
            expand (Optional[Sequence[str]]): The fields to expand in the response.

        Returns:
            Any: The issue type mapping.
        """
        return self.request(
            self._retrieve_issue_type_spec(
                workflow_scheme_id,
                issue_type,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    @traced(name="workflow_schemes_retrieve_issue_type", run_type="jira")
    async def retrieve_issue_type_async(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        issue_type: Union[int, str],
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> Any:
        """Asynchronously retrieve the workflow mapped to an issue type in a workflow scheme."""
        return await self.request_async(
            self._retrieve_issue_type_spec(
                workflow_scheme_id,
                issue_type,
                return_draft_if_exists=return_draft_if_exists,
                fields=fields,
                expand=expand,
            )
        )

    def _scheme_path(self, workflow_scheme_id: WorkflowSchemeId, suffix: str = "") -> str:
        return f"{self._base_url}/{workflow_scheme_id}{suffix}"

    def _create_spec(
        self, workflow_scheme: Optional[WorkflowSchemePayload]
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._base_url,
            "POST",
            body=dump_payload(workflow_scheme),
        )

    def _edit_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_scheme: Optional[WorkflowSchemePayload],
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id),
            "PUT",
            body=dump_payload(workflow_scheme),
            fields=fields,
            expand=expand,
        )

    def _retrieve_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id),
            "GET",
            params={QUERY_RETURN_DRAFT_IF_EXISTS: return_draft_if_exists},
            fields=fields,
            expand=expand,
        )

    def _create_draft_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/createdraft"),
            "POST",
            fields=fields,
            expand=expand,
        )

    def _retrieve_default_workflow_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/default"),
            "GET",
            params={QUERY_RETURN_DRAFT_IF_EXISTS: return_draft_if_exists},
            fields=fields,
            expand=expand,
        )

    def _remove_default_workflow_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/default"),
            "DELETE",
            params={QUERY_UPDATE_DRAFT_IF_NEEDED: update_draft_if_needed},
            fields=fields,
            expand=expand,
        )

    def _set_default_workflow_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        workflow_name: Optional[str],
        *,
        update_draft_if_needed: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/default"),
            "PUT",
            body=_default_workflow_body(workflow_name, update_draft_if_needed),
            fields=fields,
            expand=expand,
        )

    def _draft_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        method: str,
        *,
        body: Optional[Any] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/draft"),
            method,
            body=body,
            fields=fields,
            expand=expand,
        )

    def _draft_default_workflow_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        method: str,
        *,
        body: Optional[Any] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, "/draft/default"),
            method,
            body=body,
            fields=fields,
            expand=expand,
        )

    def _retrieve_issue_type_spec(
        self,
        workflow_scheme_id: WorkflowSchemeId,
        issue_type: Union[int, str],
        *,
        return_draft_if_exists: Optional[bool] = None,
        fields: Selectors = None,
        expand: Selectors = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._transport,
            self._scheme_path(workflow_scheme_id, f"/issuetype/{issue_type}"),
            "GET",
            params={QUERY_RETURN_DRAFT_IF_EXISTS: return_draft_if_exists},
            fields=fields,
            expand=expand,
        )


def _default_workflow_body(
    workflow_name: Optional[str], update_draft_if_needed: Optional[bool]
) -> dict[str, Any]:
    return dump_payload(
        DefaultWorkflow(
            workflow=workflow_name, update_draft_if_needed=update_draft_if_needed
        )
    )
