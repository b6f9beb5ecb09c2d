"""
Infraestrutura compartilhada dos adapters Django.

- unit_of_work: transações + log de ações
- session: autenticação por sessão
- mixins / api: bases das views HTML e JSON
"""
