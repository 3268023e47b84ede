from storefront.domain.models import (
    Booking,
    BookingStatus,
    Campaign,
    CampaignStatus,
    CampaignWindow,
    ContactDetails,
)
from storefront.domain.pricing import PricingBreakdown, calculate_pricing
from storefront.domain.value_objects import (
    BookingId,
    CampaignId,
    CampaignWindowId,
    Capacity,
    Money,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "Campaign",
    "CampaignStatus",
    "CampaignWindow",
    "ContactDetails",
    "PricingBreakdown",
    "calculate_pricing",
    "BookingId",
    "CampaignId",
    "CampaignWindowId",
    "Capacity",
    "Money",
]
