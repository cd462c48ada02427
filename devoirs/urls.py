# devoirs/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from devoirs.views import DevoirViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'devoirs', DevoirViewSet, basename='devoir')

urlpatterns = [
    path('', include(router.urls)),
]
