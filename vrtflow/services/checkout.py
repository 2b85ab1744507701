"""Checkout submission"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..database.carts import CartStore
from ..errors import (
    CheckoutError,
    CheckoutInProgressError,
    EmptyCartError,
    MissingContactInfoError,
)
from ..models.checkout import CheckoutResult, CheckoutState, Submission
from ..models.notification import NotificationKind
from .customer_form import CustomerInfoForm
from .delivery_client import DeliveryClient
from .notifications import NotificationSink

logger = logging.getLogger(__name__)

FIELD_LABELS = {"name": "name", "email": "email address"}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class CheckoutSubmitter:
    """
    Validates a cart and contact details and hands them to the delivery endpoint.

    Each accepted call to submit() moves through
    VALIDATING -> REJECTED | SENDING -> SUCCEEDED | FAILED and produces exactly
    one notification. The cart and the form are reset only after a successful
    delivery. While a submission is SENDING, further calls are refused.
    """

    def __init__(
        self,
        cart: CartStore,
        form: CustomerInfoForm,
        delivery: DeliveryClient,
        notifier: NotificationSink,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self.cart = cart
        self.form = form
        self.delivery = delivery
        self.notifier = notifier
        self.clock = clock
        self.state = CheckoutState.IDLE

    @property
    def is_sending(self) -> bool:
        return self.state == CheckoutState.SENDING

    def validate(self) -> None:
        """Raise the first precondition failure, if any"""
        if self.cart.is_empty():
            raise EmptyCartError()

        result = self.form.validate_for_submission()
        if not result.ok:
            raise MissingContactInfoError(result.missing_fields)

    def build_submission(self) -> Submission:
        return Submission(
            customer=self.form.info,
            items=self.cart.lines(),
            total=self.cart.total(),
            timestamp=self.clock(),
        )

    async def submit(self) -> CheckoutResult:
        """
        Submit the current cart.

        Raises:
            CheckoutInProgressError: if a previous submission has not settled
        """
        if self.is_sending:
            raise CheckoutInProgressError()

        self.state = CheckoutState.VALIDATING
        try:
            self.validate()
        except EmptyCartError as e:
            return self._rejected(
                e,
                title="Cart is empty",
                message="Please add items to your cart before submitting.",
            )
        except MissingContactInfoError as e:
            fields = " and ".join(FIELD_LABELS.get(f, f) for f in e.missing_fields)
            return self._rejected(
                e,
                title="Missing information",
                message=f"Please provide your {fields}.",
                missing_fields=e.missing_fields,
            )

        submission = self.build_submission()
        self.state = CheckoutState.SENDING
        logger.info(
            f"Submitting cart: {len(submission.items)} lines, "
            f"total={submission.total}, customer={submission.customer.email}"
        )

        try:
            await self.delivery.send(submission)
        except CheckoutError as e:
            # Rejected and transport failures look the same to the shopper
            self.state = CheckoutState.FAILED
            notification = self.notifier.notify(
                NotificationKind.ERROR,
                "Submission failed",
                "We couldn't send your order. Please try again.",
            )
            self.state = CheckoutState.IDLE
            return CheckoutResult(
                success=False,
                state=CheckoutState.FAILED,
                notification=notification,
                error=e.code,
                submission=submission,
            )
        except BaseException:
            self.state = CheckoutState.IDLE
            raise

        self.state = CheckoutState.SUCCEEDED
        notification = self.notifier.notify(
            NotificationKind.SUCCESS,
            "Order submitted",
            "Thanks! Your cart has been sent and our team will be in touch shortly.",
        )
        self.cart.clear()
        self.form.reset()
        self.state = CheckoutState.IDLE
        logger.info(f"Cart submission delivered for {submission.customer.email}")

        return CheckoutResult(
            success=True,
            state=CheckoutState.SUCCEEDED,
            notification=notification,
            submission=submission,
            close_checkout=True,
        )

    def _rejected(
        self,
        error: CheckoutError,
        title: str,
        message: str,
        missing_fields: Optional[list[str]] = None,
    ) -> CheckoutResult:
        logger.info(f"Checkout rejected: {error}")
        notification = self.notifier.notify(NotificationKind.WARNING, title, message)
        self.state = CheckoutState.IDLE
        return CheckoutResult(
            success=False,
            state=CheckoutState.REJECTED,
            notification=notification,
            error=error.code,
            missing_fields=missing_fields or [],
        )
