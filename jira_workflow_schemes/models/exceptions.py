from typing import Optional

from httpx import HTTPStatusError


class EnrichedException(Exception):
    def __init__(self, error: HTTPStatusError) -> None:
        self.status_code: Optional[int] = (
            error.response.status_code if error.response is not None else None
        )
        url = str(error.request.url) if error.request is not None else "Unknown"
        response_content = (
            error.response.text
            if error.response is not None and error.response.content
            else "No content"
        )

        enriched_message = (
            f"\nRequest URL: {url}"
            f"\nStatus Code: {self.status_code or 'Unknown'}"
            f"\nResponse Content: {response_content}"
        )

        super().__init__(enriched_message)
