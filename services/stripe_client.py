"""
Shared Stripe client, built once at import and reused for the process lifetime
"""

from pydantic import BaseModel, ConfigDict
import stripe

from config.settings import settings

# Pinned wire version. Upgrading means changing this literal.
STRIPE_API_VERSION = "2025-10-29.clover"


class StripeClientConfig(BaseModel):
    """Credentials and protocol version for the Stripe client."""
    model_config = ConfigDict(frozen=True)

    api_key: str
    api_version: str


def build_stripe_client(config: StripeClientConfig) -> stripe.StripeClient:
    return stripe.StripeClient(config.api_key, stripe_version=config.api_version)


# STRIPE_SECRET_KEY presence is the stripe constructor's concern, not ours
STRIPE_CLIENT_CONFIG = StripeClientConfig.model_construct(
    api_key=settings.stripe_secret_key,
    api_version=STRIPE_API_VERSION,
)

stripe_client = build_stripe_client(STRIPE_CLIENT_CONFIG)
