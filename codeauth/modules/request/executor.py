"""
Request executor for the CodeAuth HTTP API.

Sends exactly one POST per call and folds the outcome into three buckets:
success (200), client error (400 with an error code) and everything else,
which collapses to connection_error. Nothing here retries.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from ..api.models import OPERATION_ERRORS, ApiPath, ErrorCode, ErrorPayload

logger = logging.getLogger(__name__)


@dataclass
class ApiOutcome:
    """Classified outcome of one API call."""
    error: ErrorCode
    payload: Optional[BaseModel] = None

    @property
    def ok(self) -> bool:
        return self.error == ErrorCode.NO_ERROR


class RequestExecutor:
    """
    Performs CodeAuth API calls.

    This class is a black box that:
    - Builds the request url from the project endpoint
    - Serializes request models to JSON
    - Classifies responses and parses them into payload models
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the executor.

        Args:
            endpoint: Project endpoint host (without scheme)
            timeout: Request timeout in seconds
            http_client: Optional shared client; a short-lived one is
                opened per call when omitted
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = http_client

    def url_for(self, path: ApiPath) -> str:
        return f"https://{self.endpoint}{path.value}"

    async def call(
        self,
        path: ApiPath,
        body: BaseModel,
        payload_model: Optional[Type[BaseModel]] = None
    ) -> ApiOutcome:
        """
        Call the API and classify the response.

        Args:
            path: API sub-path
            body: Request model, sent as JSON
            payload_model: Model for the 200 body; None when the
                operation returns nothing on success

        Returns:
            ApiOutcome with the error code and, on success, the payload
        """
        try:
            response = await self._post(path, body.model_dump(mode="json"))

            if response.status_code == httpx.codes.OK:
                payload = None
                if payload_model is not None:
                    payload = payload_model.model_validate(response.json())
                return ApiOutcome(error=ErrorCode.NO_ERROR, payload=payload)

            if response.status_code == httpx.codes.BAD_REQUEST:
                return ApiOutcome(error=self._parse_error(path, response))

            logger.warning(f"Unexpected status {response.status_code} from {path.value}")
            return ApiOutcome(error=ErrorCode.CONNECTION_ERROR)

        except httpx.HTTPError as e:
            logger.warning(f"Transport error calling {path.value}: {e!r}")
            return ApiOutcome(error=ErrorCode.CONNECTION_ERROR)
        except ValidationError as e:
            logger.warning(f"Malformed response from {path.value}: {e.error_count()} invalid field(s)")
            return ApiOutcome(error=ErrorCode.CONNECTION_ERROR)
        except ValueError as e:
            logger.warning(f"Unreadable response from {path.value}: {e}")
            return ApiOutcome(error=ErrorCode.CONNECTION_ERROR)
        except Exception as e:
            logger.error(f"Unexpected error calling {path.value}: {e}")
            return ApiOutcome(error=ErrorCode.CONNECTION_ERROR)

    async def _post(self, path: ApiPath, data: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.url_for(path), json=data, timeout=self.timeout)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.url_for(path), json=data)

    def _parse_error(self, path: ApiPath, response: httpx.Response) -> ErrorCode:
        # Raises ValueError for unknown codes, which the caller maps to connection_error
        error = ErrorCode(ErrorPayload.model_validate(response.json()).error)

        if error not in OPERATION_ERRORS[path]:
            logger.warning(f"Error code '{error.value}' is not documented for {path.value}")
        return error
