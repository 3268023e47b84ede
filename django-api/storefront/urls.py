from django.urls import path

from storefront.handlers import (
    AdminSeedView,
    BookingCreateView,
    CampaignListView,
    CampaignWindowView,
)

app_name = "storefront"

urlpatterns = [
    path("campaigns.getAll", CampaignListView.as_view(), name="campaigns-get-all"),
    path("campaigns.getWindow", CampaignWindowView.as_view(), name="campaigns-get-window"),
    path("bookings.create", BookingCreateView.as_view(), name="bookings-create"),
    path("admin.seed", AdminSeedView.as_view(), name="admin-seed"),
]
