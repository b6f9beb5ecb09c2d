"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, ORM, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura

Domínios:
- accounts: clientes, abrigos e o administrador
- adoptions: pets e o ciclo de vida das solicitações de adoção
- audit: log de ações (action_log)
"""
