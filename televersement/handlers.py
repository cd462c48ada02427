# televersement/handlers.py
"""
Gestionnaire d'envoi placé avant ceux de Django. Le type MIME est contrôlé
dès l'en-tête de la partie et la taille à chaque morceau reçu : l'envoi
s'arrête au premier morceau qui dépasse la limite, sans lire le reste du
corps. Au-delà de FILE_UPLOAD_MAX_MEMORY_SIZE, Django écrit déjà les
morceaux acceptés dans un fichier temporaire ; celui-ci est supprimé à la
fermeture quand l'envoi est refusé.
"""
from django.core.files.uploadhandler import FileUploadHandler

from televersement.services import verifier_taille, verifier_type


class ControleTeleversementHandler(FileUploadHandler):

    def new_file(self, field_name, file_name, content_type, content_length, charset=None,
                 content_type_extra=None):
        super().new_file(field_name, file_name, content_type, content_length, charset, content_type_extra)
        verifier_type(content_type)
        if content_length is not None:
            verifier_taille(content_length)

    def receive_data_chunk(self, raw_data, start):
        verifier_taille(start + len(raw_data))
        # Transmis tel quel aux gestionnaires suivants
        return raw_data

    def file_complete(self, file_size):
        return None
