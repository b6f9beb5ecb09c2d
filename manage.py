#!/usr/bin/env python
"""Utilitário de linha de comando do Django para o PetAdoption Manager."""

import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django não encontrado. Ative o ambiente virtual e instale "
            "as dependências com `pip install -e .`"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
