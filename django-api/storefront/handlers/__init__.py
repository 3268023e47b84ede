from storefront.handlers.views import (
    AdminSeedView,
    BookingCreateView,
    CampaignListView,
    CampaignWindowView,
)

__all__ = [
    "AdminSeedView",
    "BookingCreateView",
    "CampaignListView",
    "CampaignWindowView",
]
