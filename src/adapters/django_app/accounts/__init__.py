"""App Django de Contas (clientes e abrigos)."""
