"""
PasswordHasher baseado em django.contrib.auth.hashers.

O algoritmo segue PASSWORD_HASHERS do settings (PBKDF2 por padrão).
"""

from django.contrib.auth.hashers import make_password, check_password


class DjangoPasswordHasher:
    """Implementação Django do PasswordHasher."""

    def hash(self, raw_password: str) -> str:
        return make_password(raw_password)

    def verify(self, raw_password: str, password_hash: str) -> bool:
        if not raw_password or not password_hash:
            return False
        return check_password(raw_password, password_hash)
