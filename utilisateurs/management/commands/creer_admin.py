"""
Commande Django pour créer le premier compte administrateur.

Usage:
    python manage.py creer_admin
    python manage.py creer_admin --username admin --password motdepasse

Sans --password, le mot de passe est lu dans la variable d'environnement
ADMIN_PASSWORD. La commande ne fait rien si le compte existe déjà.
"""
import os

from django.core.management.base import BaseCommand, CommandError
from utilisateurs.models import Utilisateur


class Command(BaseCommand):
    help = 'Crée le compte administrateur initial du back-office'

    def add_arguments(self, parser):
        parser.add_argument(
            '--username',
            default='admin',
            help="Nom d'utilisateur du compte (défaut: admin)",
        )
        parser.add_argument(
            '--password',
            default=None,
            help='Mot de passe (défaut: variable ADMIN_PASSWORD)',
        )

    def handle(self, *args, **options):
        username = options['username']
        password = options['password'] or os.getenv('ADMIN_PASSWORD')

        if Utilisateur.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f"Le compte {username} existe déjà"))
            return

        if not password or len(password) < 6:
            raise CommandError('Mot de passe requis (au moins 6 caractères) : --password ou ADMIN_PASSWORD')

        Utilisateur.objects.create_superuser(username=username, password=password, role='admin')
        self.stdout.write(self.style.SUCCESS(f"Compte administrateur {username} créé"))
