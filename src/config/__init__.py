"""
Configuração do projeto PetAdoption Manager.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- wsgi: WSGI application
- container: Dependency Injection Container
"""
