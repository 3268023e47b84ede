from django.urls import include, path

urlpatterns = [
    path("api/trpc/", include("storefront.urls")),
]
