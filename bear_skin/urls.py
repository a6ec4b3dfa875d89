from django.urls import path, include
from . import views

app_name = "bear_skin"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # API
    path("api/", include(("bear_skin.api_urls", "bear_skin_api"), namespace="bear_skin_api")),

    # Витрина компонентов
    path("styleguide/", views.StyleguideView.as_view(), name="styleguide"),
]
