"""
Payment routes
Ledger CRUD plus the Stripe payment-intent call.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.exceptions import PaymentNotConfiguredError
from hotel_pms.models.ontology import Payment
from hotel_pms.models.schemas import (
    PaymentCreate, PaymentUpdate, PaidTotal, PaymentIntentRequest, PaymentIntentResponse,
)
from hotel_pms.services.payment_service import PaymentService
from hotel_pms.services.payment_gateway import PaymentGateway, get_payment_gateway

router = APIRouter(prefix="/payments", tags=["payments"])
intent_router = APIRouter(prefix="/payment-intents", tags=["payments"])


@router.get("", response_model=List[Payment])
def list_payments(store: MemoryStore = Depends(get_store)):
    return PaymentService(store).get_payments()


@router.get("/booking/{booking_id}", response_model=List[Payment])
def list_booking_payments(booking_id: str, store: MemoryStore = Depends(get_store)):
    return PaymentService(store).get_payments_by_booking(booking_id)


@router.get("/booking/{booking_id}/paid-total", response_model=PaidTotal)
def get_booking_paid_total(booking_id: str, store: MemoryStore = Depends(get_store)):
    """Sum of the booking's completed payments; pending, failed and refunded are left out"""
    return PaidTotal(booking_id=booking_id, paid_total=PaymentService(store).get_paid_total(booking_id))


@router.get("/{payment_id}", response_model=Payment)
def get_payment(payment_id: str, store: MemoryStore = Depends(get_store)):
    payment = PaymentService(store).get_payment(payment_id)
    if not payment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment


@router.post("", response_model=Payment, status_code=status.HTTP_201_CREATED)
def create_payment(data: PaymentCreate, store: MemoryStore = Depends(get_store)):
    return PaymentService(store).create_payment(data)


@router.patch("/{payment_id}", response_model=Payment)
def update_payment(payment_id: str, data: PaymentUpdate, store: MemoryStore = Depends(get_store)):
    return PaymentService(store).update_payment(payment_id, data)


@intent_router.post("", response_model=PaymentIntentResponse)
def create_payment_intent(
    data: PaymentIntentRequest,
    gateway: Optional[PaymentGateway] = Depends(get_payment_gateway)
):
    """Create a Stripe payment intent and hand its client secret to the dashboard"""
    if gateway is None:
        raise PaymentNotConfiguredError(
            "Payment provider not configured. Please set the STRIPE_SECRET_KEY environment variable."
        )
    return PaymentIntentResponse(client_secret=gateway.create_payment_intent(data.amount))
