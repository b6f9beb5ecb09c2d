"""
Django Models para o log de ações.

O action_log é somente-inclusão: o repositório nunca atualiza nem
remove linhas. Não há ForeignKey para as tabelas auditadas, assim
o histórico sobrevive à remoção do registro (ex.: pet excluído).
"""

from django.db import models
from django.utils import timezone


class ActionLogModel(models.Model):
    """
    Uma linha do log de ações.

    Fields:
        id: event_id do Domain Event de origem
        table_name: Tabela afetada (client, shelter, admin, pet, adoption)
        record_id: Registro afetado
        action_type: Ação (INSERT, APPROVE, LOGIN, ...)
        actor_type: Papel de quem executou
        actor_id: Quem executou
        details: Dados do evento (JSON)
        timestamp: Momento do evento
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="event_id do evento de origem"
    )

    table_name = models.CharField(max_length=20, db_index=True)

    record_id = models.CharField(max_length=64)

    action_type = models.CharField(max_length=20, db_index=True)

    actor_type = models.CharField(max_length=20, null=True, blank=True)

    actor_id = models.CharField(max_length=254, null=True, blank=True)

    details = models.JSONField(default=dict, blank=True)

    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'action_log'
        verbose_name = 'Entrada do log'
        verbose_name_plural = 'Log de ações'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['-timestamp'], name='action_log_timestamp_idx'),
            models.Index(fields=['table_name', 'record_id'], name='action_log_record_idx'),
        ]

    def __str__(self):
        return f"{self.action_type} {self.table_name}:{self.record_id}"
