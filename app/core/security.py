import hashlib
import hmac
import logging
import secrets
from datetime import timedelta
from typing import Any, Dict, Optional, Tuple

import jwt

from app.core.clock import Clock, system_clock

logger = logging.getLogger(__name__)

ALGORITHM = "HS512"
SALT_BYTES = 128  # mesmo tamanho da chave gerada por um HMAC-SHA512 novo


# ----------------------------
# Senhas
# ----------------------------
def _digest(password: str, salt: bytes) -> bytes:
    return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()

def hash_password(password: str) -> Tuple[bytes, bytes]:
    salt = secrets.token_bytes(SALT_BYTES)
    return _digest(password, salt), salt

def verify_password(password: str, password_hash: Optional[bytes], salt: Optional[bytes]) -> bool:
    if not password_hash or not salt:
        return False
    return hmac.compare_digest(_digest(password, salt), password_hash)


# ----------------------------
# Tokens
# ----------------------------
class TokenIssuer:
    def __init__(self, secret: str, ttl_days: int = 7, clock: Clock = system_clock):
        if not secret:
            raise ValueError("AUTH_SECRET não configurado")
        self._secret = secret
        self._ttl = timedelta(days=ttl_days)
        self._clock = clock

    def create_token(self, user) -> str:
        now = self._clock.now()
        payload = {
            "sub": user.cpf,
            "name": user.nome,
            "email": user.email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("token expirado")
            return None
        except jwt.InvalidTokenError as e:
            logger.info(f"token inválido: {e}")
            return None
