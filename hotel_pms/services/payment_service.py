"""
Payment service
Payment records against bookings. Charging a card goes through
PaymentGateway; this service only keeps the ledger.
"""
from typing import Callable, List, Optional
from datetime import datetime
from decimal import Decimal
import logging
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import Payment, PaymentStatus
from hotel_pms.models.schemas import PaymentCreate, PaymentUpdate
from hotel_pms.models.events import EventType, PaymentRecordedData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher

logger = logging.getLogger(__name__)


class PaymentService:
    """Payment service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock

    def get_payments(self) -> List[Payment]:
        return self.store.payments.list()

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        return self.store.payments.get(payment_id)

    def get_payments_by_booking(self, booking_id: str) -> List[Payment]:
        """Empty when the booking id is unknown"""
        return self.store.payments.filter(lambda p: p.booking_id == booking_id)

    def get_paid_total(self, booking_id: str) -> Decimal:
        """Sum of completed payments for a booking"""
        return sum(
            (p.amount for p in self.get_payments_by_booking(booking_id)
             if p.status == PaymentStatus.COMPLETED),
            Decimal("0.00")
        )

    def create_payment(self, data: PaymentCreate) -> Payment:
        payment = self.store.payments.create(data.model_dump())
        if not self.store.bookings.get(payment.booking_id):
            logger.warning(f"Payment {payment.id} references unknown booking {payment.booking_id}")

        self._publish_event(Event(
            event_type=EventType.PAYMENT_RECORDED,
            timestamp=self._clock(),
            data=PaymentRecordedData(
                payment_id=payment.id,
                booking_id=payment.booking_id,
                amount=str(payment.amount),
                method=payment.method.value
            ).to_dict(),
            source="payment_service"
        ))
        return payment

    def update_payment(self, payment_id: str, data: PaymentUpdate) -> Payment:
        return self.store.payments.update(payment_id, data.changes())
