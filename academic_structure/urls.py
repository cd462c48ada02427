# academic_structure/urls.py
from django.urls import path
from .views import CategorieViewSet

urlpatterns = [
    path('categories', CategorieViewSet.as_view({'get': 'list'}), name='categories'),
    path('levels', CategorieViewSet.as_view({'get': 'niveaux'}), name='levels'),
]
