from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._services import HttpTransport, Transport, WorkflowSchemesService
from ._utils import setup_logging
from ._utils.constants import (
    DEFAULT_API_VERSION,
    ENV_API_TOKEN,
    ENV_API_VERSION,
    ENV_BASE_URL,
    ENV_USERNAME,
)
from .models.errors import BaseUrlMissingError, CredentialsMissingError

load_dotenv(override=True)


class Jira:
    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        api_token: Optional[str] = None,
        api_version: Optional[str] = None,
        transport: Optional[Transport] = None,
        debug: bool = False,
    ) -> None:
        setup_logging(debug)

        if transport is not None:
            self._config: Optional[Config] = None
            self._transport = transport
            return

        base_url_value = base_url or env.get(ENV_BASE_URL)
        api_token_value = api_token or env.get(ENV_API_TOKEN)

        try:
            self._config = Config(
                base_url=base_url_value,  # type: ignore
                api_token=api_token_value,  # type: ignore
                username=username or env.get(ENV_USERNAME),
                api_version=api_version
                or env.get(ENV_API_VERSION, DEFAULT_API_VERSION),
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"][0] == "base_url":
                    raise BaseUrlMissingError() from e
                elif error["loc"][0] == "api_token":
                    raise CredentialsMissingError() from e
            raise

        self._transport = HttpTransport(self._config)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def workflow_schemes(self) -> WorkflowSchemesService:
        return WorkflowSchemesService(self._transport)
