"""
Migration inicial para o domínio de Adoções.

Cria as tabelas:
- pet: Pets cadastrados pelos abrigos
- adoption: Solicitações de adoção
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        # =================================================================
        # Tabela: pet
        # =================================================================
        migrations.CreateModel(
            name='PetModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do pet'
                )),
                ('name', models.CharField(max_length=100)),
                ('species', models.CharField(max_length=50, db_index=True)),
                ('breed', models.CharField(max_length=100, blank=True, default='')),
                ('age', models.PositiveSmallIntegerField(null=True, blank=True)),
                ('gender', models.CharField(
                    max_length=10,
                    choices=[
                        ('Male', 'Macho'),
                        ('Female', 'Fêmea'),
                        ('Unknown', 'Desconhecido'),
                    ],
                    default='Unknown',
                )),
                ('description', models.TextField(blank=True, default='')),
                ('pet_image', models.CharField(max_length=500, blank=True, default='')),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('Available', 'Disponível'),
                        ('Hold', 'Em espera'),
                        ('Adopted', 'Adotado'),
                    ],
                    default='Available',
                    db_index=True,
                    help_text='Disponibilidade do pet'
                )),
                ('arrival_date', models.DateField(default=django.utils.timezone.localdate)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('shelter', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='pets',
                    to='accounts.sheltermodel',
                    help_text='Abrigo responsável'
                )),
            ],
            options={
                'verbose_name': 'Pet',
                'verbose_name_plural': 'Pets',
                'db_table': 'pet',
                'ordering': ['-arrival_date'],
                'indexes': [
                    models.Index(fields=['shelter', 'arrival_date'], name='pet_shelter_arrival_idx'),
                    models.Index(fields=['status', 'arrival_date'], name='pet_status_arrival_idx'),
                ],
            },
        ),

        # =================================================================
        # Tabela: adoption
        # =================================================================
        migrations.CreateModel(
            name='AdoptionModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da solicitação'
                )),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('Pending', 'Pendente'),
                        ('Approved', 'Aprovada'),
                        ('Rejected', 'Recusada'),
                        ('Completed', 'Concluída'),
                        ('Cancelled', 'Cancelada'),
                    ],
                    default='Pending',
                    db_index=True,
                )),
                ('client_reason', models.TextField(blank=True, default='')),
                ('shelter_response', models.TextField(blank=True, default='')),
                ('request_date', models.DateField(default=django.utils.timezone.localdate)),
                ('visit_date', models.DateField(null=True, blank=True)),
                ('approval_date', models.DateField(null=True, blank=True)),
                ('completion_date', models.DateField(null=True, blank=True)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('pet', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='adoptions',
                    to='adoptions.petmodel'
                )),
                ('client', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='adoptions',
                    to='accounts.clientmodel'
                )),
            ],
            options={
                'verbose_name': 'Solicitação de Adoção',
                'verbose_name_plural': 'Solicitações de Adoção',
                'db_table': 'adoption',
                'ordering': ['-request_date', '-updated_at'],
                'indexes': [
                    models.Index(fields=['pet', 'status'], name='adoption_pet_status_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(
                        fields=('client', 'pet'),
                        name='unique_adoption_per_client_pet'
                    ),
                ],
            },
        ),
    ]
