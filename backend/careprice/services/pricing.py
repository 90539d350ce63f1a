"""
Price resolution - turns a hospital's rate table and the user's insurance
selection into a displayable PriceInfo.

Resolution order:
1. Cash selected: the hospital's cash price.
2. Provider has no rates at this hospital: cash price.
3. Plan selected and offered by the provider: that plan's negotiated range.
4. Otherwise: the range spanning every plan of the provider. A provider
   listed with no plans falls back to cash.

A plan name the provider does not offer is treated the same as no plan at
all (rule 4). That is the product behaviour the UI relies on ("All Plans"),
not an error.
"""

import logging
from typing import Optional

from careprice.models import CASH, CashPrice, InsuranceRange, InsuranceRates, PlanRange, PriceInfo

logger = logging.getLogger(__name__)

# Available plan types per insurance provider, as offered in the search form
INSURANCE_PLANS = {
    "aetna": ["PPO", "HMO", "EPO"],
    "bcbs": ["PPO", "HMO", "POS"],
    "uhc": ["PPO", "HMO", "EPO"],
    "cigna": ["PPO", "HMO", "POS"],
    "humana": ["PPO", "HMO", "EPO"],
}

INSURANCE_PROVIDERS = {
    "aetna": "Aetna",
    "bcbs": "Blue Cross Blue Shield",
    "uhc": "UnitedHealthcare",
    "cigna": "Cigna",
    "humana": "Humana",
}

PRICE_NOTES = {
    "cash": "Showing cash prices - pay directly without insurance",
    "plan_range": "Showing negotiated rate ranges for your selected plan",
    "insurance_range": "Showing price ranges across all plan types. Select a specific plan for narrower ranges.",
}


def resolve_price(
    insurance_rates: InsuranceRates,
    cash_price: float,
    insurance: str,
    plan: Optional[str] = None,
) -> PriceInfo:
    """Resolve the price a patient would see for one procedure at one hospital."""
    if insurance == CASH:
        return CashPrice(value=cash_price)

    provider_rates = insurance_rates.get(insurance)
    if provider_rates is None:
        return _fallback_to_cash(cash_price, f"no rates for provider '{insurance}'")

    if plan and plan in provider_rates:
        plan_range = provider_rates[plan]
        return PlanRange(min=plan_range.min, max=plan_range.max, plan_name=plan)

    if not provider_rates:
        return _fallback_to_cash(cash_price, f"provider '{insurance}' lists no plans")

    if plan:
        logger.debug(f"Plan '{plan}' not offered by '{insurance}', aggregating across all plans")

    return InsuranceRange(
        min=min(r.min for r in provider_rates.values()),
        max=max(r.max for r in provider_rates.values()),
    )


def _fallback_to_cash(cash_price: float, reason: str) -> CashPrice:
    logger.debug(f"Falling back to cash price: {reason}")
    return CashPrice(value=cash_price)


def display_price(price_info: PriceInfo) -> float:
    """Single comparable number for sorting: the cash value, or the low end of a range."""
    if isinstance(price_info, CashPrice):
        return price_info.value
    return price_info.min


def price_label(price_info: PriceInfo) -> str:
    if isinstance(price_info, CashPrice):
        return "Cash Price"
    if isinstance(price_info, PlanRange):
        return f"{price_info.plan_name} Plan Rate"
    return "Insurance Rate Range"


def price_subtext(price_info: PriceInfo) -> str:
    """One-line explanation shown under a result's price label."""
    if isinstance(price_info, CashPrice):
        return "Pay directly without insurance"
    if isinstance(price_info, PlanRange):
        return "Negotiated rate range for your plan"
    return "Range across all plan types"


def price_note(price_type: str) -> Optional[str]:
    """Subtitle explaining what kind of prices a result list shows."""
    return PRICE_NOTES.get(price_type)


def format_currency(amount: float) -> str:
    """Format a dollar amount without cents, e.g. 1500 -> "$1,500"."""
    return f"${amount:,.0f}"
