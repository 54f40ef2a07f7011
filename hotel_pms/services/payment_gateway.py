"""
Payment gateway - Stripe
Single outbound call per intent: no retry, no idempotency key, SDK default timeout.
"""
from typing import Optional
from decimal import Decimal, ROUND_HALF_UP
import logging
import stripe
from fastapi import Depends
from hotel_pms.config import Settings, get_settings
from hotel_pms.exceptions import UpstreamPaymentError

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Dollars to cents, halves rounded up"""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentGateway:
    """Creates payment intents; the client is the stripe module unless injected"""

    def __init__(self, api_key: str, currency: str = "aud", client=stripe):
        self.api_key = api_key
        self.currency = currency
        self._client = client

    def create_payment_intent(self, amount: Decimal) -> str:
        """Returns the client secret the dashboard confirms the card with"""
        try:
            intent = self._client.PaymentIntent.create(
                amount=to_minor_units(amount),
                currency=self.currency,
                api_key=self.api_key,
            )
        except stripe.StripeError as e:
            logger.error(f"Payment intent for {amount} {self.currency} failed: {e}")
            raise UpstreamPaymentError(f"Error creating payment intent: {e}")

        logger.info(f"Payment intent {intent.id} created for {amount} {self.currency}")
        return intent.client_secret


def get_payment_gateway(app_settings: Settings = Depends(get_settings)) -> Optional[PaymentGateway]:
    """Dependency: None when no secret key is configured"""
    if not app_settings.STRIPE_SECRET_KEY:
        return None
    return PaymentGateway(app_settings.STRIPE_SECRET_KEY, currency=app_settings.PAYMENT_CURRENCY)
