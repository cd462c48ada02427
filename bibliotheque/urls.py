# bibliotheque/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from bibliotheque.views import LivreViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'books', LivreViewSet, basename='livre')

urlpatterns = [
    path('', include(router.urls)),
]
