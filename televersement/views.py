# televersement/views.py
from rest_framework.exceptions import ParseError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from televersement.handlers import ControleTeleversementHandler
from televersement.services import enregistrer_fichier


class TeleversementView(APIView):
    """
    Téléversement multipart (champ ``file``) ; retourne ``{"url": ...}``
    """
    parser_classes = [MultiPartParser, FormParser]

    def initialize_request(self, request, *args, **kwargs):
        # Avant toute lecture du corps
        request.upload_handlers.insert(0, ControleTeleversementHandler(request))
        return super().initialize_request(request, *args, **kwargs)

    def post(self, request):
        fichier = request.FILES.get('file')
        if fichier is None:
            raise ParseError('No file uploaded')
        return Response({'url': enregistrer_fichier(fichier)})
