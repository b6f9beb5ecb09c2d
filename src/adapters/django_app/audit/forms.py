"""
Filtros do painel do administrador.
"""

from django import forms

from src.core.audit.entities import ActionType, AuditTable


class ActionLogFilterForm(forms.Form):
    """Filtro do log de ações por tabela, ação e quantidade."""

    table_name = forms.ChoiceField(
        label='Tabela',
        required=False,
        choices=[('', 'Todas')] + [(t.value, t.value) for t in AuditTable],
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    action_type = forms.ChoiceField(
        label='Ação',
        required=False,
        choices=[('', 'Todas')] + [(a.value, a.value) for a in ActionType],
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    limit = forms.IntegerField(
        label='Quantidade',
        required=False,
        min_value=1,
        max_value=500,
        widget=forms.NumberInput(attrs={'class': 'form-control'}),
    )
