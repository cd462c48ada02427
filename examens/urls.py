# examens/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ExamenViewSet, ExamenBlancViewSet

router = DefaultRouter(trailing_slash=False)
router.register('exams', ExamenViewSet, basename='examen')
router.register('exam-blancs', ExamenBlancViewSet, basename='examen-blanc')

urlpatterns = [
    path('', include(router.urls)),
]
