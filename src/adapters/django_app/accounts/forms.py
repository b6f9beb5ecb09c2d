"""
Django Forms de Contas (login e cadastro).

Forms fazem validação estrutural; regras de negócio (email único,
tamanho da senha, formato do email) ficam nos Use Cases/Entities.
"""

from django import forms


class LoginForm(forms.Form):
    """Form de login (mesmo formato para os três papéis)."""

    email = forms.CharField(
        label='Email',
        max_length=254,
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'voce@exemplo.com',
        }),
        error_messages={'required': 'Email é obrigatório'},
    )

    password = forms.CharField(
        label='Senha',
        max_length=128,
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Senha é obrigatória'},
    )


class ClientRegisterForm(forms.Form):
    """
    Form para cadastro de cliente.

    Valida dados básicos antes de passar para RegisterClientService.
    """

    full_name = forms.CharField(
        label='Nome completo',
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Nome completo é obrigatório'},
    )

    email = forms.CharField(
        label='Email',
        max_length=254,
        widget=forms.EmailInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Email é obrigatório'},
    )

    password = forms.CharField(
        label='Senha',
        max_length=128,
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Senha é obrigatória'},
    )

    phone_number = forms.CharField(
        label='Telefone',
        max_length=20,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
    )

    address = forms.CharField(
        label='Endereço',
        max_length=255,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
    )


class ShelterRegisterForm(forms.Form):
    """Form para cadastro de abrigo."""

    shelter_name = forms.CharField(
        label='Nome do abrigo',
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Nome do abrigo é obrigatório'},
    )

    email = forms.CharField(
        label='Email',
        max_length=254,
        widget=forms.EmailInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Email é obrigatório'},
    )

    password = forms.CharField(
        label='Senha',
        max_length=128,
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
        error_messages={'required': 'Senha é obrigatória'},
    )

    location = forms.CharField(
        label='Localização',
        max_length=255,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
    )

    contact_number = forms.CharField(
        label='Telefone de contato',
        max_length=20,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
    )
