# televersement/services.py
"""
Enregistrement des médias insérés dans l'éditeur (images, vidéos, PDF).

Le fichier est contrôlé (taille, type MIME) avant toute écriture disque,
puis rangé dans un sous-dossier selon son type. Aucune déduplication : deux
envois du même fichier donnent deux URL distinctes.
"""
import logging
import os
import time

from django.conf import settings
from django.core.files.storage import FileSystemStorage
from django.utils.crypto import get_random_string
from django.utils.text import get_valid_filename

from contenus.exceptions import TeleversementRefuse

logger = logging.getLogger(__name__)

TYPES_IMAGES = ('image/jpeg', 'image/png', 'image/gif', 'image/webp')
TYPES_VIDEOS = ('video/mp4', 'video/webm', 'video/ogg')
TYPES_PDF = ('application/pdf',)

DOSSIERS = {
    **{type_mime: 'images' for type_mime in TYPES_IMAGES},
    **{type_mime: 'videos' for type_mime in TYPES_VIDEOS},
    **{type_mime: 'pdfs' for type_mime in TYPES_PDF},
}


def stockage_televersements():
    return FileSystemStorage(location=settings.UPLOAD_ROOT, base_url=settings.UPLOAD_URL)


def verifier_taille(taille):
    taille_max = settings.UPLOAD_MAX_SIZE
    if taille > taille_max:
        raise TeleversementRefuse(
            f"File size too large. Maximum size is {taille_max // (1024 * 1024)}MB"
        )


def verifier_type(type_mime):
    if type_mime not in DOSSIERS:
        raise TeleversementRefuse('File type not allowed')


def verifier_fichier(fichier):
    """Lève TeleversementRefuse si le fichier dépasse la taille maximale ou n'est pas autorisé"""
    verifier_taille(fichier.size)
    verifier_type(fichier.content_type)


def nom_unique(nom_original):
    horodatage = int(time.time() * 1000)
    suffixe = get_random_string(9, '0123456789')
    nom = get_valid_filename(os.path.basename(nom_original or 'fichier'))
    return f"{horodatage}-{suffixe}-{nom}"


def enregistrer_fichier(fichier):
    """Contrôle puis enregistre le fichier ; retourne son URL publique."""
    verifier_fichier(fichier)

    dossier = DOSSIERS[fichier.content_type]
    stockage = stockage_televersements()
    chemin = stockage.save(f"{dossier}/{nom_unique(fichier.name)}", fichier)

    logger.info(f"Fichier téléversé: {chemin} ({fichier.content_type}, {fichier.size} octets)")
    return stockage.url(chemin)
