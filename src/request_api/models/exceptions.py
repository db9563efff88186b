from httpx import HTTPStatusError


class EnrichedException(Exception):
    """HTTP status error carrying the request and the response body."""

    def __init__(self, error: HTTPStatusError) -> None:
        self.url = str(error.request.url)
        self.http_method = error.request.method
        self.status_code = error.response.status_code
        self.response_content = (
            error.response.content.decode("utf-8", errors="replace")
            if error.response.content
            else ""
        )

        super().__init__(
            f"\nRequest URL: {self.url}"
            f"\nHTTP Method: {self.http_method}"
            f"\nStatus Code: {self.status_code}"
            f"\nResponse Content: {self.response_content}"
        )
