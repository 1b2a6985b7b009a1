"""
Billing Service - Stripe Checkout and customer portal sessions
"""

import logging
from typing import Optional

from config.settings import settings
from services import stripe_client as stripe_client_module
from services.plans import PlanConfigurationError, get_price_id_for_plan

logger = logging.getLogger(__name__)

DEFAULT_FRONTEND_URL = "http://localhost:3000"


class BillingService:
    """
    Service class for billing business logic.
    All Stripe calls go through the shared, version-pinned client.
    """

    def __init__(self, client=None):
        """
        Initialize the billing service.

        Args:
            client: Stripe client to use; defaults to the process-wide handle
        """
        self.client = client or stripe_client_module.stripe_client

    async def create_checkout_session(
        self,
        plan: str,
        email: Optional[str] = None,
        user_id: Optional[str] = None,
    ):
        """
        Create a subscription-mode Stripe Checkout session for a plan.

        Args:
            plan: Plan slug ("monthly" or "yearly")
            email: Optional email to prefill on the Checkout page
            user_id: Optional account id, echoed back in metadata and client_reference_id

        Returns:
            Normalized response: {"data": url, "is_error": False} or {"error": str(e), "is_error": True}
        """
        try:
            price_id = get_price_id_for_plan(plan)
        except PlanConfigurationError as e:
            return {"error": str(e), "is_error": True}

        frontend_url = settings.frontend_url or DEFAULT_FRONTEND_URL

        params = {
            "mode": "subscription",
            "payment_method_types": ["card"],
            "line_items": [{"price": price_id, "quantity": 1}],
            "success_url": f"{frontend_url}/billing/success?session_id={{CHECKOUT_SESSION_ID}}",
            "cancel_url": f"{frontend_url}/pricing",
            "metadata": {"plan": plan},
        }
        if email:
            params["customer_email"] = email
        if user_id:
            params["client_reference_id"] = user_id
            params["metadata"]["supabase_user_id"] = user_id

        try:
            checkout_session = await self.client.v1.checkout.sessions.create_async(params=params)
            logger.info(f"Created checkout session {checkout_session.id} for plan {plan}")
            return {"data": checkout_session.url, "is_error": False}
        except Exception as e:
            logger.error(f"Failed to create checkout session: {e}", exc_info=True)
            return {"error": str(e), "is_error": True}

    async def create_billing_portal_session(self, stripe_customer_id: str):
        """
        Create a Stripe Billing Portal session.

        Args:
            stripe_customer_id: Stripe customer ID

        Returns:
            Normalized response: {"data": url, "is_error": False} or {"error": str(e), "is_error": True}
        """
        if not stripe_customer_id:
            logger.error("Stripe customer ID is required.")
            return {"error": "Stripe customer ID is required.", "is_error": True}

        frontend_url = settings.frontend_url or DEFAULT_FRONTEND_URL

        try:
            portal_session = await self.client.v1.billing_portal.sessions.create_async(
                params={
                    "customer": stripe_customer_id,
                    "return_url": f"{frontend_url}/profile",
                }
            )
            return {"data": portal_session.url, "is_error": False}
        except Exception as e:
            logger.error(f"Failed to create billing portal session: {e}", exc_info=True)
            return {"error": str(e), "is_error": True}
