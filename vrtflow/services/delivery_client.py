"""
Delivery API Client

HTTP client for the external endpoint that receives cart submissions
and forwards them to the sales inbox.
"""

import logging
from typing import Optional

import httpx

from ..errors import DeliveryRejectedError, TransportError
from ..models.checkout import DeliveryRequest, Submission

logger = logging.getLogger(__name__)


class DeliveryClient:
    """
    Client for the submission delivery endpoint.

    Sends one JSON POST per submission. A non-2xx answer raises
    DeliveryRejectedError; a request that never completes raises
    TransportError.
    """

    def __init__(
        self,
        delivery_url: str,
        to: str,
        subject: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize delivery client.

        Args:
            delivery_url: Full URL of the delivery endpoint
            to: Destination address for every submission
            subject: Subject line for every submission
            timeout: Seconds before the request is abandoned
            transport: Optional httpx transport, used by tests
        """
        self.delivery_url = delivery_url
        self.to = to
        self.subject = subject
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def build_request(self, submission: Submission) -> DeliveryRequest:
        return DeliveryRequest(to=self.to, subject=self.subject, cart_data=submission)

    async def send(self, submission: Submission) -> httpx.Response:
        """Post a submission to the delivery endpoint"""
        body = self.build_request(submission).model_dump(mode="json", by_alias=True)

        try:
            response = await self._http_client.post(
                self.delivery_url,
                json=body,
                headers={"Accept": "application/json"},
            )
        except httpx.TimeoutException as e:
            logger.error(f"Delivery request timed out: {e!r}")
            raise TransportError(f"Delivery request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Delivery request failed: {e!r}")
            raise TransportError(f"Delivery request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Delivery rejected: {response.status_code} - {response.text}")
            raise DeliveryRejectedError(response.status_code, response.text)

        return response
