"""
Migration inicial para o log de ações.

Cria a tabela:
- action_log: Trilha somente-inclusão das mudanças
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ActionLogModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='event_id do evento de origem'
                )),
                ('table_name', models.CharField(max_length=20, db_index=True)),
                ('record_id', models.CharField(max_length=64)),
                ('action_type', models.CharField(max_length=20, db_index=True)),
                ('actor_type', models.CharField(max_length=20, null=True, blank=True)),
                ('actor_id', models.CharField(max_length=254, null=True, blank=True)),
                ('details', models.JSONField(default=dict, blank=True)),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Entrada do log',
                'verbose_name_plural': 'Log de ações',
                'db_table': 'action_log',
                'ordering': ['-timestamp'],
            },
        ),
        migrations.AddIndex(
            model_name='actionlogmodel',
            index=models.Index(fields=['-timestamp'], name='action_log_timestamp_idx'),
        ),
        migrations.AddIndex(
            model_name='actionlogmodel',
            index=models.Index(fields=['table_name', 'record_id'], name='action_log_record_idx'),
        ),
    ]
