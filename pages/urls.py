# pages/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from pages.views import DescriptionPageViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'page-descriptions', DescriptionPageViewSet, basename='description-page')

urlpatterns = [
    path('', include(router.urls)),
]
