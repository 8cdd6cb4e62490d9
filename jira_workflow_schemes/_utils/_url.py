from urllib.parse import urlparse

from .constants import DEFAULT_API_VERSION


class JiraUrl:
    """A class that represents the base URL of a Jira instance.

    This class is used to resolve REST API paths against the instance, keeping
    any context path the instance is deployed under.

    >>> url = JiraUrl("https://example.atlassian.net/jira/")
    >>> url.base_url
    'https://example.atlassian.net'
    >>> url.context_path
    '/jira'
    >>> url.build_url("/workflowscheme/10")
    'https://example.atlassian.net/jira/rest/api/2/workflowscheme/10'

    Args:
        url (str): The URL to parse.
        api_version (str): The REST API version used when building URLs.
    """

    def __init__(self, url: str, api_version: str = DEFAULT_API_VERSION):
        self._url = url
        self._api_version = api_version

    def __str__(self):
        return self._url

    def __repr__(self):
        return f"JiraUrl({self._url})"

    def __eq__(self, other: object):
        if not isinstance(other, JiraUrl):
            return NotImplemented

        return self._url == str(other) and self._api_version == other.api_version

    def __ne__(self, other: object):
        if not isinstance(other, JiraUrl):
            return NotImplemented

        return not self == other

    def __hash__(self):
        return hash((self._url, self._api_version))

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def base_url(self) -> str:
        parsed = urlparse(self._url)

        return f"{parsed.scheme}://{parsed.hostname}{f':{parsed.port}' if parsed.port else ''}"

    @property
    def context_path(self) -> str:
        path = urlparse(self._url).path.strip("/")

        return f"/{path}" if path else ""

    @property
    def api_root(self) -> str:
        return f"{self.base_url}{self.context_path}/rest/api/{self._api_version}"

    def build_url(self, path: str) -> str:
        if not self._is_relative_url(path):
            return path

        if path and not path.startswith("/"):
            path = f"/{path}"

        return f"{self.api_root}{path}"

    def _is_relative_url(self, url: str) -> bool:
        # Empty URLs are considered relative
        if not url:
            return True

        parsed = urlparse(url)

        # Protocol-relative URLs (starting with //) are not relative
        if url.startswith("//"):
            return False

        if parsed.scheme:
            return False

        if parsed.netloc:
            return False

        return True
