"""
Django Forms para pets e solicitações de adoção.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Princípios:
- Forms NÃO contêm lógica de negócio
- Dono do pet / cliente solicitante vêm sempre da sessão, nunca do form
"""

from django import forms

from src.core.adoptions.dtos import parse_optional_date
from src.core.shared.exceptions import ValidationError as DomainValidationError

from .models import PetGenderChoices


class IsoDateField(forms.DateField):
    """
    DateField que também aceita data e hora ISO ("2030-01-10T10:00:00").

    A hora é descartada, como na API JSON.
    """

    def to_python(self, value):
        if value in self.empty_values:
            return None
        try:
            return parse_optional_date(value, self.label or 'date')
        except DomainValidationError:
            raise forms.ValidationError(self.error_messages['invalid'], code='invalid')


class PetSearchForm(forms.Form):
    """Busca da vitrine (nome, espécie ou raça)."""

    search = forms.CharField(
        label='Buscar',
        max_length=100,
        required=False,
        error_messages={'max_length': 'Busca deve ter no máximo 100 caracteres'},
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Nome, espécie ou raça...',
        }),
    )


class PetAddForm(forms.Form):
    """
    Form para cadastro de pet.

    Valida dados básicos antes de passar para AddPetService.
    """

    name = forms.CharField(
        label='Nome',
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Nome do pet é obrigatório'},
    )

    species = forms.CharField(
        label='Espécie',
        max_length=50,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Dog, Cat...',
        }),
        error_messages={'required': 'Espécie é obrigatória'},
    )

    breed = forms.CharField(
        label='Raça',
        max_length=100,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
    )

    age = forms.IntegerField(
        label='Idade (anos)',
        required=False,
        min_value=0,
        max_value=40,
        widget=forms.NumberInput(attrs={'class': 'form-control'}),
    )

    gender = forms.ChoiceField(
        label='Sexo',
        choices=PetGenderChoices.choices,
        initial=PetGenderChoices.UNKNOWN,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )

    description = forms.CharField(
        label='Descrição',
        max_length=2000,
        required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
    )

    pet_image = forms.CharField(
        label='URL da foto',
        max_length=500,
        required=False,
        widget=forms.URLInput(attrs={'class': 'form-control'}),
    )


class PetActionForm(forms.Form):
    """Form para remover pet ou marcá-lo como adotado."""

    pet_id = forms.CharField(max_length=36, widget=forms.HiddenInput())


class AdoptionRequestForm(forms.Form):
    """Form para o cliente solicitar adoção."""

    pet_id = forms.CharField(max_length=36, widget=forms.HiddenInput())

    client_reason = forms.CharField(
        label='Por que você quer adotar?',
        max_length=1000,
        required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
    )


class AdoptionActionForm(forms.Form):
    """Form base das ações sobre uma solicitação."""

    adoption_id = forms.CharField(max_length=36, widget=forms.HiddenInput())


class AdoptionApproveForm(AdoptionActionForm):
    shelter_response = forms.CharField(
        label='Mensagem para o cliente',
        max_length=1000,
        required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
    )

    visit_date = IsoDateField(
        label='Data da visita',
        required=False,
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
        error_messages={'invalid': 'Data da visita inválida'},
    )


class AdoptionRejectForm(AdoptionActionForm):
    shelter_response = forms.CharField(
        label='Motivo',
        max_length=1000,
        required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
    )


class AdoptionFinalizeForm(AdoptionActionForm):
    """
    Form para finalizar adoção aprovada.

    outcome "Adopted" conclui; "Available" devolve o pet à vitrine.
    """

    outcome = forms.ChoiceField(
        label='Resultado',
        choices=[
            ('Adopted', 'Adoção concluída'),
            ('Available', 'Pet devolvido'),
        ],
        widget=forms.Select(attrs={'class': 'form-control'}),
    )

    completion_date = IsoDateField(
        label='Data',
        required=False,
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
        error_messages={'invalid': 'Data de conclusão inválida'},
    )
