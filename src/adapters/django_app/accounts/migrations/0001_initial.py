"""
Migration inicial para o domínio de Contas.

Cria as tabelas:
- client: Clientes (adotantes)
- shelter: Abrigos
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: client
        # =================================================================
        migrations.CreateModel(
            name='ClientModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do cliente'
                )),
                ('full_name', models.CharField(max_length=100)),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='Email de login (normalizado)'
                )),
                ('password_hash', models.CharField(max_length=255)),
                ('phone_number', models.CharField(max_length=20, blank=True, default='')),
                ('address', models.CharField(max_length=255, blank=True, default='')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'client',
                'ordering': ['full_name'],
            },
        ),

        # =================================================================
        # Tabela: shelter
        # =================================================================
        migrations.CreateModel(
            name='ShelterModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do abrigo'
                )),
                ('shelter_name', models.CharField(max_length=100, unique=True)),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='Email de login (normalizado)'
                )),
                ('password_hash', models.CharField(max_length=255)),
                ('location', models.CharField(max_length=255, blank=True, default='')),
                ('contact_number', models.CharField(max_length=20, blank=True, default='')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Abrigo',
                'verbose_name_plural': 'Abrigos',
                'db_table': 'shelter',
                'ordering': ['shelter_name'],
            },
        ),
    ]
