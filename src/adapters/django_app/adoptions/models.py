"""
Django Models para o domínio de Adoções.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/adoptions/entities.py.

Relacionamentos:
- PetModel: pertence a um abrigo (remover o abrigo remove os pets)
- AdoptionModel: liga cliente e pet (remover o pet remove as solicitações)
"""

from django.db import models
from django.utils import timezone


class PetStatusChoices(models.TextChoices):
    """Choices para status do pet (espelha PetStatus do Core)."""
    AVAILABLE = 'Available', 'Disponível'
    ON_HOLD = 'Hold', 'Em espera'
    ADOPTED = 'Adopted', 'Adotado'


class PetGenderChoices(models.TextChoices):
    MALE = 'Male', 'Macho'
    FEMALE = 'Female', 'Fêmea'
    UNKNOWN = 'Unknown', 'Desconhecido'


class AdoptionStatusChoices(models.TextChoices):
    """Choices para status da solicitação (espelha AdoptionStatus do Core)."""
    PENDING = 'Pending', 'Pendente'
    APPROVED = 'Approved', 'Aprovada'
    REJECTED = 'Rejected', 'Recusada'
    COMPLETED = 'Completed', 'Concluída'
    CANCELLED = 'Cancelled', 'Cancelada'


class PetModel(models.Model):
    """
    Model Django para persistência de Pets.

    NÃO contém lógica de negócio - apenas estrutura de dados.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do pet"
    )

    shelter = models.ForeignKey(
        'accounts.ShelterModel',
        on_delete=models.CASCADE,
        related_name='pets',
        help_text="Abrigo responsável"
    )

    name = models.CharField(max_length=100)
    species = models.CharField(max_length=50, db_index=True)
    breed = models.CharField(max_length=100, blank=True, default='')
    age = models.PositiveSmallIntegerField(null=True, blank=True)

    gender = models.CharField(
        max_length=10,
        choices=PetGenderChoices.choices,
        default=PetGenderChoices.UNKNOWN,
    )

    description = models.TextField(blank=True, default='')
    pet_image = models.CharField(max_length=500, blank=True, default='')

    status = models.CharField(
        max_length=20,
        choices=PetStatusChoices.choices,
        default=PetStatusChoices.AVAILABLE,
        db_index=True,
        help_text="Disponibilidade do pet"
    )

    arrival_date = models.DateField(default=timezone.localdate)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'pet'
        verbose_name = 'Pet'
        verbose_name_plural = 'Pets'
        ordering = ['-arrival_date']
        indexes = [
            models.Index(fields=['shelter', 'arrival_date'], name='pet_shelter_arrival_idx'),
            models.Index(fields=['status', 'arrival_date'], name='pet_status_arrival_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.species})"


class AdoptionModel(models.Model):
    """
    Model Django para persistência de solicitações de adoção.

    Um cliente só pode ter uma solicitação por pet.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da solicitação"
    )

    pet = models.ForeignKey(
        PetModel,
        on_delete=models.CASCADE,
        related_name='adoptions',
    )

    client = models.ForeignKey(
        'accounts.ClientModel',
        on_delete=models.CASCADE,
        related_name='adoptions',
    )

    status = models.CharField(
        max_length=20,
        choices=AdoptionStatusChoices.choices,
        default=AdoptionStatusChoices.PENDING,
        db_index=True,
    )

    client_reason = models.TextField(blank=True, default='')
    shelter_response = models.TextField(blank=True, default='')

    request_date = models.DateField(default=timezone.localdate)
    visit_date = models.DateField(null=True, blank=True)
    approval_date = models.DateField(null=True, blank=True)
    completion_date = models.DateField(null=True, blank=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'adoption'
        verbose_name = 'Solicitação de Adoção'
        verbose_name_plural = 'Solicitações de Adoção'
        ordering = ['-request_date', '-updated_at']
        constraints = [
            models.UniqueConstraint(
                fields=['client', 'pet'],
                name='unique_adoption_per_client_pet',
            ),
        ]
        indexes = [
            models.Index(fields=['pet', 'status'], name='adoption_pet_status_idx'),
        ]

    def __str__(self):
        return f"{self.client_id} → {self.pet_id} [{self.status}]"
