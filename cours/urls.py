# cours/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from cours.views import CoursViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'courses', CoursViewSet, basename='cours')

urlpatterns = [
    path('', include(router.urls)),
]
