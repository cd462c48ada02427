# televersement/urls.py
from django.urls import path
from televersement.views import TeleversementView

urlpatterns = [
    path('upload', TeleversementView.as_view(), name='upload'),
]
