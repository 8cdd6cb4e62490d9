from typing import Optional

from pydantic import BaseModel

from ._utils.constants import DEFAULT_API_VERSION, DEFAULT_TIMEOUT


class Config(BaseModel):
    base_url: str
    api_token: str
    username: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
