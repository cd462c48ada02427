# backoffice/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from drf_spectacular.views import (
    SpectacularAPIView,          # Pour le JSON/YAML brut
    SpectacularSwaggerView,      # L'interface Swagger UI interactive
    SpectacularRedocView,        # Alternative plus "livre" (Redoc)
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('utilisateurs.urls')),
    path('api/', include('academic_structure.urls')),
    path('api/', include('cours.urls')),
    path('api/', include('devoirs.urls')),
    path('api/', include('examens.urls')),
    path('api/', include('bibliotheque.urls')),
    path('api/', include('pages.urls')),
    path('api/', include('televersement.urls')),

    # Swagger / OpenAPI
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]

# Servir les fichiers téléversés en développement
if settings.DEBUG:
    urlpatterns += static(settings.UPLOAD_URL, document_root=settings.UPLOAD_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
