class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Jira base URL is not configured. Set \033[1mJIRA_URL\033[22m or pass base_url.",
    ):
        self.message = message
        super().__init__(self.message)


class CredentialsMissingError(Exception):
    def __init__(
        self,
        message="Jira credentials are not configured. Set \033[1mJIRA_API_TOKEN\033[22m or pass api_token.",
    ):
        self.message = message
        super().__init__(self.message)
