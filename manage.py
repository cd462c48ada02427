#!/usr/bin/env python
"""Utilitaire en ligne de commande de Django pour les tâches d'administration."""
import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backoffice.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Impossible d'importer Django. Est-il installé et disponible "
            "dans la variable d'environnement PYTHONPATH ?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
