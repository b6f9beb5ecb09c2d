"""App Django de Auditoria (log de ações)."""
