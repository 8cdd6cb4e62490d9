import importlib.metadata


def user_agent_value(specific_component: str) -> str:
    product = "Jira.Python.Sdk"
    product_component = f"Jira.Python.Sdk.WorkflowSchemes.{specific_component}"

    try:
        version = importlib.metadata.version("jira-workflow-schemes")
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"

    return f"{product}/{product_component}/{version}"
