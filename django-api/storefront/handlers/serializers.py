"""Serializers for request input and for rendering domain models as camelCase JSON."""

from rest_framework import serializers

from storefront.services.seed_loader import SeedMode


# Input


class CampaignListInputSerializer(serializers.Serializer):
    date = serializers.CharField(required=False, allow_blank=True)
    time = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, default=1, min_value=1)


class WindowLookupInputSerializer(serializers.Serializer):
    campaignId = serializers.CharField()
    windowId = serializers.CharField()


class ContactInputSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, trim_whitespace=False)
    email = serializers.CharField(min_length=1, trim_whitespace=False)
    phone = serializers.CharField(min_length=1, trim_whitespace=False)


class BookingCreateInputSerializer(serializers.Serializer):
    windowId = serializers.CharField()
    slotsBooked = serializers.IntegerField(min_value=1)
    contact = ContactInputSerializer()


class AdminSeedInputSerializer(serializers.Serializer):
    mode = serializers.ChoiceField(
        choices=[mode.value for mode in SeedMode], default=SeedMode.UPSERT.value
    )
    reset = serializers.BooleanField(default=False)


# Output


class CampaignSerializer(serializers.Serializer):
    """Serializer for Campaign domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class CampaignWindowSerializer(serializers.Serializer):
    """Serializer for CampaignWindow domain model."""

    id = serializers.CharField()
    campaignId = serializers.CharField(source="campaign_id")
    campaignName = serializers.CharField(source="campaign_name")
    date = serializers.DateField()
    startTime = serializers.CharField(source="start_time")
    endTime = serializers.CharField(source="end_time")
    slotsAvailable = serializers.IntegerField(source="slots_available")
    bookedSlots = serializers.IntegerField(source="booked_slots")
    advertsPerSlot = serializers.IntegerField(source="adverts_per_slot")
    priceMinor = serializers.IntegerField(source="price_minor")
    currency = serializers.CharField()
    priceDisplay = serializers.CharField(source="price")
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class CampaignGroupSerializer(serializers.Serializer):
    campaign = CampaignSerializer(allow_null=True)
    windows = CampaignWindowSerializer(many=True)


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    pages = serializers.IntegerField()


class WindowPageSerializer(serializers.Serializer):
    data = CampaignGroupSerializer(many=True)
    pagination = PaginationSerializer()


class WindowDetailSerializer(serializers.Serializer):
    window = CampaignWindowSerializer()
    campaign = CampaignSerializer(allow_null=True)
    availableSlots = serializers.IntegerField(source="available_slots")


class ContactSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField()
    campaignWindowId = serializers.CharField(source="campaign_window_id")
    slotsBooked = serializers.IntegerField(source="slots_booked")
    contact = ContactSerializer()
    subtotal = serializers.IntegerField()
    discountApplied = serializers.IntegerField(source="discount_applied")
    subtotalAfterDiscount = serializers.IntegerField(source="subtotal_after_discount")
    vatAmount = serializers.IntegerField(source="vat_amount")
    vatPercentage = serializers.IntegerField(source="vat_percentage")
    total = serializers.IntegerField()
    totalDisplay = serializers.CharField(source="total_money")
    currency = serializers.CharField()
    status = serializers.CharField()
    reference = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class PricingBreakdownSerializer(serializers.Serializer):
    subtotal = serializers.IntegerField()
    discountPercentage = serializers.IntegerField(source="discount_percentage")
    discountApplied = serializers.IntegerField(source="discount_applied")
    subtotalAfterDiscount = serializers.IntegerField(source="subtotal_after_discount")
    vatPercentage = serializers.IntegerField(source="vat_percentage")
    vatAmount = serializers.IntegerField(source="vat_amount")
    total = serializers.IntegerField()
    currency = serializers.CharField()
    tier = serializers.CharField()


class BookingResultSerializer(serializers.Serializer):
    booking = BookingSerializer()
    tier = serializers.CharField()
    breakdown = PricingBreakdownSerializer()


class SeedResultSerializer(serializers.Serializer):
    rows_total = serializers.IntegerField()
    created = serializers.IntegerField()
    updated = serializers.IntegerField()
    archived = serializers.IntegerField()
    duration_ms = serializers.IntegerField()
    seed_version = serializers.CharField()
