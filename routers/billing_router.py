"""
Billing Router - Stripe Checkout, customer portal, and the retired webhook route
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from services.billing_service import BillingService
from utils.responses import success_response, error_response

billing_router = APIRouter(prefix="/api/billing", tags=["billing"])

LEGACY_WEBHOOK_ERROR = "legacy_webhook_removed"


class CheckoutRequest(BaseModel):
    plan: str
    email: Optional[str] = None
    user_id: Optional[str] = None


class PortalRequest(BaseModel):
    stripe_customer_id: str


@billing_router.api_route("/webhook", methods=["POST", "GET"])
async def legacy_stripe_webhook():
    """
    Retired Stripe webhook. Always 410 Gone so the dispatcher stops delivering here.
    The request is never read.
    """
    return JSONResponse(status_code=410, content={"error": LEGACY_WEBHOOK_ERROR})


@billing_router.post("/create-checkout-session")
async def create_checkout_session(body: CheckoutRequest):
    """
    Create a Stripe Checkout session for a subscription plan.

    Returns:
        Success envelope with {"url": checkout_url}, or a 400 error envelope
    """
    result = await BillingService().create_checkout_session(
        body.plan, email=body.email, user_id=body.user_id
    )
    if result.get("is_error"):
        return error_response(result.get("error", "Unknown error"), message="Failed to create checkout session")
    return success_response({"url": result["data"]})


@billing_router.post("/portal")
async def create_billing_portal_session(body: PortalRequest):
    """
    Create a Stripe Billing Portal session.

    Returns:
        Success envelope with {"url": portal_url}, or a 400 error envelope
    """
    result = await BillingService().create_billing_portal_session(body.stripe_customer_id)
    if result.get("is_error"):
        return error_response(result.get("error", "Unknown error"), message="Failed to create portal session")
    return success_response({"url": result["data"]})
