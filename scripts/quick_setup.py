#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo (opcional)
5. Gera o hash da senha do administrador (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --hash-admin-password
"""

import os
import sys
import argparse
import getpass

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """
    Cria abrigos, clientes e pets de exemplo.

    Usa os próprios use cases, então o log de ações também é
    preenchido. Contas já existentes são ignoradas.
    """
    from src.config.container import get_container
    from src.core.accounts.dtos import RegisterClientInputDTO, RegisterShelterInputDTO
    from src.core.adoptions.dtos import AddPetInputDTO, RequestAdoptionInputDTO
    from src.core.shared.exceptions import DuplicateEntityError

    container = get_container()

    sample_shelters = [
        {
            'shelter_name': 'Abrigo Patinhas',
            'email': 'contato@patinhas.org',
            'location': 'São Paulo - SP',
            'contact_number': '11 99999-0001',
        },
        {
            'shelter_name': 'Lar dos Bichos',
            'email': 'ola@lardosbichos.org',
            'location': 'Campinas - SP',
            'contact_number': '19 98888-0002',
        },
    ]

    sample_pets = [
        ('Rex', 'Dog', 'Labrador', 3, 'Male', 'Brincalhão e ótimo com crianças.'),
        ('Mia', 'Cat', 'Siamês', 2, 'Female', 'Tranquila, gosta de colo.'),
        ('Thor', 'Dog', 'Vira-lata', 5, 'Male', 'Companheiro e protetor.'),
        ('Luna', 'Cat', '', 1, 'Female', 'Filhote curiosa.'),
    ]

    print("📝 Criando abrigos de exemplo...")
    shelters = []
    for data in sample_shelters:
        try:
            shelter = container.register_shelter_service().execute(
                RegisterShelterInputDTO(password='senha123', **data)
            )
        except DuplicateEntityError:
            print(f"   - {data['shelter_name']} já existe")
            continue
        shelters.append(shelter)
        print(f"   ✓ {shelter.shelter_name}")

    if not shelters:
        print("✅ Dados de exemplo já existentes.")
        return

    print("🐾 Criando pets de exemplo...")
    pets = []
    for i, (name, species, breed, age, gender, description) in enumerate(sample_pets):
        pet = container.add_pet_service().execute(
            AddPetInputDTO(
                shelter_id=shelters[i % len(shelters)].id,
                name=name,
                species=species,
                breed=breed,
                age=age,
                gender=gender,
                description=description,
            )
        )
        pets.append(pet)
        print(f"   ✓ {pet.name} ({pet.species})")

    print("👤 Criando cliente de exemplo...")
    try:
        client = container.register_client_service().execute(
            RegisterClientInputDTO(
                full_name='Maria Silva',
                email='maria@example.com',
                password='senha123',
                phone_number='11 97777-0003',
            )
        )
    except DuplicateEntityError:
        print("   - maria@example.com já existe")
        return

    container.request_adoption_service().execute(
        RequestAdoptionInputDTO(
            pet_id=pets[0].id,
            client_id=client.id,
            client_reason='Tenho quintal grande e muito tempo livre.',
        )
    )

    print(f"✅ {len(shelters)} abrigos, {len(pets)} pets e 1 solicitação criados!")
    print("   Senha de todas as contas de exemplo: senha123")


def hash_admin_password():
    """Gera o valor de ADMIN_PASSWORD_HASH para o arquivo .env."""
    from django.contrib.auth.hashers import make_password
    from src.core.accounts.entities import PASSWORD_MIN_LENGTH

    password = getpass.getpass("Senha do administrador: ")
    if len(password) < PASSWORD_MIN_LENGTH:
        print(f"❌ A senha deve ter pelo menos {PASSWORD_MIN_LENGTH} caracteres.")
        return

    print("\nAdicione ao seu .env:")
    print(f"ADMIN_PASSWORD_HASH={make_password(password)}")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Admin configurado: {'sim' if settings.ADMIN_PASSWORD_HASH else 'não'}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/")
    print("   3. Painel admin: http://localhost:8000/admin/login/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )
    parser.add_argument(
        '--hash-admin-password',
        action='store_true',
        help='Gerar ADMIN_PASSWORD_HASH a partir de uma senha'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🐾 PetAdoption Manager - Quick Setup")
    print("=" * 60 + "\n")

    # Configurar Django
    setup_django()

    if args.hash_admin_password:
        hash_admin_password()
        return

    if args.check_only:
        check_connection()
        return

    # Verificar conexão
    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///db.sqlite3")
        return

    # Executar migrations
    run_migrations()

    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()

    # Mostrar informações
    show_info()


if __name__ == '__main__':
    main()
