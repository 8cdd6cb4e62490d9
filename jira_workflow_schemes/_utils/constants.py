# Environment variables
ENV_BASE_URL = "JIRA_URL"
ENV_USERNAME = "JIRA_USERNAME"
ENV_API_TOKEN = "JIRA_API_TOKEN"
ENV_API_VERSION = "JIRA_API_VERSION"
ENV_DISABLE_SSL_VERIFY = "JIRA_DISABLE_SSL_VERIFY"

# Headers
HEADER_USER_AGENT = "User-Agent"

# Query parameters
QUERY_FIELDS = "fields"
QUERY_EXPAND = "expand"
QUERY_RETURN_DRAFT_IF_EXISTS = "returnDraftIfExists"
QUERY_UPDATE_DRAFT_IF_NEEDED = "updateDraftIfNeeded"

DEFAULT_API_VERSION = "2"
DEFAULT_TIMEOUT = 30.0
