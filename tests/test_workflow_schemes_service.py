import logging

import pytest

from jira_workflow_schemes import RequestSpec, WorkflowSchemesService
from jira_workflow_schemes.models import WorkflowScheme


class TestWorkflowSchemesService:
    class TestCreate:
        def test_create_targets_collection_root(self, service, transport):
            result = service.create({"name": "Scheme", "defaultWorkflow": "jira"})

            assert result == {"id": 5}
            assert transport.last.endpoint == "/workflowscheme"
            assert transport.last.url == "/workflowscheme"
            assert transport.last.method == "POST"
            assert transport.last.json == {"name": "Scheme", "defaultWorkflow": "jira"}
            assert transport.last.params == {}

        def test_create_serializes_model_by_alias(self, service, transport):
            service.create(
                WorkflowScheme(
                    name="Scheme",
                    default_workflow="jira",
                    issue_type_mappings={"10001": "builds"},
                )
            )

            assert transport.last.json == {
                "name": "Scheme",
                "defaultWorkflow": "jira",
                "issueTypeMappings": {"10001": "builds"},
            }

        def test_create_without_payload_sends_empty_body(self, service, transport):
            service.create()

            assert transport.last.json == {}

    class TestEdit:
        def test_edit(self, service, transport):
            service.edit(5, {"description": "new"}, fields=["name", "description"])

            assert transport.last.method == "PUT"
            assert transport.last.endpoint == "/workflowscheme/5"
            assert transport.last.json == {"description": "new"}
            assert transport.last.params == {"fields": "name,description"}

        def test_edit_passes_update_draft_flag_in_body(self, service, transport):
            service.edit(5, WorkflowScheme(name="x", update_draft_if_needed=True))

            assert transport.last.json == {"name": "x", "updateDraftIfNeeded": True}

    class TestRetrieve:
        def test_retrieve(self, service, transport):
            service.retrieve(5, return_draft_if_exists=True)

            assert transport.last.method == "GET"
            assert transport.last.endpoint == "/workflowscheme/5"
            assert transport.last.params == {"returnDraftIfExists": True}
            assert transport.last.json == {}

        def test_unset_flag_is_not_sent(self, service, transport):
            service.retrieve(5)

            assert transport.last.params == {}

        def test_false_flag_is_sent(self, service, transport):
            service.retrieve(5, return_draft_if_exists=False)

            assert transport.last.params == {"returnDraftIfExists": False}

    class TestDefaultWorkflow:
        def test_retrieve_default_workflow(self, service, transport):
            service.retrieve_default_workflow(5, return_draft_if_exists=True)

            assert transport.last.method == "GET"
            assert transport.last.endpoint == "/workflowscheme/5/default"
            assert transport.last.params == {"returnDraftIfExists": True}

        def test_remove_default_workflow(self, service, transport):
            service.remove_default_workflow(5, update_draft_if_needed=True)

            assert transport.last.method == "DELETE"
            assert transport.last.endpoint == "/workflowscheme/5/default"
            assert transport.last.params == {"updateDraftIfNeeded": True}

        def test_set_default_workflow(self, service, transport):
            service.set_default_workflow(5, workflow_name="X", update_draft_if_needed=True)

            assert transport.last.method == "PUT"
            assert transport.last.url == "/workflowscheme/5/default"
            assert transport.last.json == {"workflow": "X", "updateDraftIfNeeded": True}
            assert transport.last.params == {}

        def test_set_default_workflow_omits_unset_flag(self, service, transport):
            service.set_default_workflow(5, "X")

            assert transport.last.json == {"workflow": "X"}

    class TestDraft:
        def test_create_draft(self, service, transport):
            service.create_draft(5)

            assert transport.last.method == "POST"
            assert transport.last.endpoint == "/workflowscheme/5/createdraft"
            assert transport.last.json == {}

        @pytest.mark.parametrize("workflow_scheme_id", [5, "5", 10100, "abc"])
        def test_draft_operations_share_endpoint(
            self, service, transport, workflow_scheme_id
        ):
            service.retrieve_draft(workflow_scheme_id)
            service.edit_draft(workflow_scheme_id, {"name": "draft"})
            service.delete_draft(workflow_scheme_id)

            endpoint = f"/workflowscheme/{workflow_scheme_id}/draft"
            assert [spec.endpoint for spec in transport.specs] == [endpoint] * 3
            assert [spec.method for spec in transport.specs] == ["GET", "PUT", "DELETE"]
            assert transport.specs[1].json == {"name": "draft"}

        def test_draft_default_workflow(self, service, transport):
            service.retrieve_draft_default_workflow(5)
            service.set_draft_default_workflow(5, "X", update_draft_if_needed=False)
            service.remove_draft_default_workflow(5)

            assert [spec.endpoint for spec in transport.specs] == [
                "/workflowscheme/5/draft/default"
            ] * 3
            assert [spec.method for spec in transport.specs] == ["GET", "PUT", "DELETE"]
            assert transport.specs[1].json == {
                "workflow": "X",
                "updateDraftIfNeeded": False,
            }

    class TestIssueType:
        def test_retrieve_issue_type(self, service, transport):
            service.retrieve_issue_type(5, "Bug", return_draft_if_exists=True)

            assert transport.last.method == "GET"
            assert transport.last.endpoint == "/workflowscheme/5/issuetype/Bug"
            assert transport.last.params == {"returnDraftIfExists": True}

    class TestSelectors:
        def test_fields_and_expand_are_comma_joined(self, service, transport):
            service.retrieve_draft(5, fields=["a", "b", "c"], expand=["user"])

            assert transport.last.params == {"fields": "a,b,c", "expand": "user"}

        def test_empty_expand_sends_empty_string(self, service, transport):
            service.retrieve_draft(5, expand=[])

            assert transport.last.params == {"expand": ""}

        def test_selectors_merge_with_flags(self, service, transport):
            service.retrieve_issue_type(
                5, 10001, return_draft_if_exists=True, fields=["workflow"]
            )

            assert transport.last.params == {
                "returnDraftIfExists": True,
                "fields": "workflow",
            }

        def test_single_string_selector_is_not_split(self, service, transport):
            service.retrieve(5, fields="name", expand="user")

            assert transport.last.params == {"fields": "name", "expand": "user"}

        def test_request_is_logged_at_debug(self, service, caplog):
            with caplog.at_level(logging.DEBUG, logger="jira_workflow_schemes"):
                service.remove_default_workflow(5, update_draft_if_needed=True)

            assert "DELETE /workflowscheme/5/default" in caplog.text
            assert "updateDraftIfNeeded" in caplog.text

    class TestDescriptor:
        def test_every_operation_sets_redirect_and_json_flags(self, service, transport):
            service.create({})
            service.edit(1, {})
            service.retrieve(1)
            service.create_draft(1)
            service.retrieve_default_workflow(1)
            service.remove_default_workflow(1)
            service.set_default_workflow(1, "X")
            service.retrieve_draft(1)
            service.edit_draft(1, {})
            service.delete_draft(1)
            service.retrieve_draft_default_workflow(1)
            service.set_draft_default_workflow(1, "X")
            service.remove_draft_default_workflow(1)
            service.retrieve_issue_type(1, "Bug")

            assert len(transport.specs) == 14
            assert all(spec.follow_redirects for spec in transport.specs)
            assert all(spec.json_encoded for spec in transport.specs)

        def test_identical_calls_build_equal_specs(self, service, transport):
            for _ in range(2):
                service.set_default_workflow(
                    5, "X", update_draft_if_needed=True, fields=["a"], expand=[]
                )

            first, second = transport.specs
            assert first == second
            assert first is not second

        def test_spec_is_immutable(self, service, transport):
            service.retrieve(5, fields=["a"])

            with pytest.raises(AttributeError):
                transport.last.method = "POST"  # type: ignore[misc]
            with pytest.raises(TypeError):
                transport.last.params["fields"] = "b"  # type: ignore[index]

        def test_missing_identifier_is_forwarded(self, service, transport):
            service.retrieve(None)  # type: ignore[arg-type]

            assert transport.last.endpoint == "/workflowscheme/None"

        def test_payload_mapping_is_not_mutated(self, service, transport):
            payload = {"name": "Scheme"}
            service.edit(5, payload, fields=["name"])

            assert payload == {"name": "Scheme"}
            assert isinstance(transport.last, RequestSpec)

    class TestAsync:
        async def test_retrieve_async(self, service, transport):
            result = await service.retrieve_async(5, return_draft_if_exists=True)

            assert result == {"id": 5}
            assert transport.last.endpoint == "/workflowscheme/5"
            assert transport.last.params == {"returnDraftIfExists": True}

        async def test_async_builds_same_spec_as_sync(self, service, transport):
            service.set_draft_default_workflow(7, "X", fields=["a", "b"])
            await service.set_draft_default_workflow_async(7, "X", fields=["a", "b"])

            first, second = transport.specs
            assert first == second

        async def test_create_async(self, service, transport):
            await service.create_async({"name": "Scheme"})

            assert transport.last.endpoint == "/workflowscheme"
            assert transport.last.method == "POST"

        async def test_transport_errors_propagate(self, transport):
            class FailingTransport(type(transport)):
                async def make_request_async(self, spec):
                    raise RuntimeError("scheme in use")

            service = WorkflowSchemesService(FailingTransport())

            with pytest.raises(RuntimeError, match="scheme in use"):
                await service.delete_draft_async(5)
