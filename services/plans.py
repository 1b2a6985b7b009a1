"""
Plan slugs and their Stripe price ids
"""

import logging
from typing import Dict, Optional

from config.settings import settings

logger = logging.getLogger(__name__)

PLAN_MONTHLY = "monthly"
PLAN_YEARLY = "yearly"

# Price IDs from the Stripe dashboard
PRICE_IDS: Dict[str, Optional[str]] = {
    PLAN_MONTHLY: settings.stripe_price_monthly,
    PLAN_YEARLY: settings.stripe_price_yearly,
}

if not PRICE_IDS[PLAN_MONTHLY] or not PRICE_IDS[PLAN_YEARLY]:
    logger.warning("Stripe price IDs not set. Add STRIPE_PRICE_MONTHLY and STRIPE_PRICE_YEARLY to .env")


class PlanConfigurationError(ValueError):
    """Raised for unknown plans or plans without a configured price."""


def is_plan_slug(value) -> bool:
    return isinstance(value, str) and value in PRICE_IDS


def get_price_id_for_plan(plan: str) -> str:
    """
    Resolve the Stripe price id for a plan.

    Raises:
        PlanConfigurationError: if the plan is unknown or its price id is not configured
    """
    if not is_plan_slug(plan):
        raise PlanConfigurationError(f"Unknown plan: {plan}")
    price_id = PRICE_IDS[plan]
    if not price_id:
        logger.error(f"Stripe price id missing for plan: {plan}")
        raise PlanConfigurationError(f"Stripe price id missing for plan: {plan}")
    return price_id

