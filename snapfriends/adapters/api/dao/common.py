import httpx
import asyncio
import time
from typing import Any
import logging

from snapfriends.exceptions import APIError, NetworkError, InfrastructureError


class CommonHTTPClient:
    """
    Authenticated transport for the service API, using httpx async client
    """
    def __init__(
            self,
            base_url: str,
            timeout: float = 30.0,
            max_retries: int = 1,
            retry_delay: float = 1.0,
            logger: logging.Logger | None = None,
            transport: httpx.AsyncBaseTransport | None = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        self._current_token: str | None = None

        self._logger = logger or logging.getLogger(__name__)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
            transport=self._transport
        )
        if self._current_token:
            self._client.headers["Authorization"] = f"Bearer {self._current_token}"
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    def set_auth_token(self, token: str):
        """
        Setting an authentication token for all subsequent requests
        """
        self._current_token = token
        if self._client:
            self._client.headers["Authorization"] = f"Bearer {token}"

    def clear_auth_token(self):
        self._current_token = None
        if self._client and "Authorization" in self._client.headers:
            del self._client.headers["Authorization"]

    async def post(self, endpoint: str, data: dict[str, Any]) -> Any:
        """
        POST ``data`` as JSON and return the decoded body, or None for an empty body
        """
        return await self._request_with_retry("POST", endpoint, json=data)

    async def _request_with_retry(self, method: str, endpoint: str, **kwargs) -> Any:
        for attempt in range(self.max_retries):
            try:
                return await self._request(method, endpoint, **kwargs)

            except APIError as e:
                if e.is_client_error or attempt >= self.max_retries - 1:
                    raise
                delay = self.retry_delay * (2 ** attempt)
                self._logger.warning(f"Server error {e.status_code}, retrying in {delay}s")
                await asyncio.sleep(delay)

            except NetworkError as e:
                if attempt >= self.max_retries - 1:
                    raise
                delay = self.retry_delay * (2 ** attempt)
                self._logger.warning(f"Network error, retrying in {delay}s: {e}")
                await asyncio.sleep(delay)

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        if not self._client:
            raise RuntimeError("The HTTP client is not initialized. Use async with context manager.")

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            self._logger.debug(f"HTTP {method} {url}")

            # Logging request data (without sensitive information)
            log_data = {k: v for k, v in kwargs.items() if k != 'json' or not self._contains_sensitive_data(v)}
            self._logger.debug(f"Request data: {log_data}")

            start_time = time.time()
            response = await self._client.request(method, url, **kwargs)
            response_time = time.time() - start_time

            self._logger.debug(f"Response time: {response_time:.2f}s, Status: {response.status_code}")

            response.raise_for_status()

            result = response.json() if response.content else None
            self._logger.debug(f"Response data: {result}")

            return result

        except httpx.HTTPStatusError as e:
            error_message = f"HTTP error {e.response.status_code} for {method} {url}: {e.response.text}"

            if e.response.status_code >= 500:
                self._logger.error(error_message)
            else:
                self._logger.warning(error_message)

            response_data = None
            if e.response.content:
                try:
                    response_data = e.response.json()
                except ValueError:
                    response_data = {"raw_response": e.response.text[:500]}

            raise APIError(
                message=f"API error: {e.response.status_code}",
                status_code=e.response.status_code,
                response_data=response_data
            ) from e

        except httpx.RequestError as e:
            self._logger.error(f"Network error for {method} {url}: {str(e)}")
            raise NetworkError(f"Network error: {str(e)}") from e

        except ValueError as e:
            # Body present but not JSON
            self._logger.error(f"Undecodable response for {method} {url}: {str(e)}")
            raise InfrastructureError(f"Invalid response body: {str(e)}", original_error=e) from e

    def _contains_sensitive_data(self, data: Any) -> bool:
        """
        Checks if the data contains sensitive information
        """
        if not isinstance(data, dict):
            return False

        sensitive_keys = {'password', 'token', 'secret', 'numbers'}
        return any(key in str(data).lower() for key in sensitive_keys)
