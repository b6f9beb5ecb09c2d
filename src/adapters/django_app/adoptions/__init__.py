"""App Django de Adoções (pets e solicitações)."""
