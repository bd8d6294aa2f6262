"""
Utilidades de seguridad: hashing y verificación de contraseñas.

Los digests se guardan como una sola cadena autodescriptiva::

    pbkdf2_sha256$<iteraciones>$<salt_hex>$<hash_hex>

de modo que el factor de costo puede cambiar (PASSWORD_HASH_ITERATIONS) sin
invalidar los digests existentes.
"""

import hashlib
import hmac
import logging
import os
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def _derive(secret: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", secret.encode("utf-8"), salt, iterations)


def hash_password(secret: str, iterations: Optional[int] = None) -> str:
    """
    Genera el digest salado de una contraseña.

    Args:
        secret: Contraseña en texto plano
        iterations: Iteraciones PBKDF2; por defecto las de la configuración

    Returns:
        Digest en formato ``pbkdf2_sha256$iter$salt$hash``
    """
    iterations = iterations or settings.password_hash_iterations
    salt = os.urandom(SALT_BYTES)
    dk = _derive(secret, salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${dk.hex()}"


def verify_password(secret: str, digest: str) -> bool:
    """
    Verifica una contraseña contra un digest almacenado.

    La comparación es de tiempo constante. Un digest mal formado nunca verifica.

    Args:
        secret: Contraseña candidata
        digest: Digest producido por hash_password

    Returns:
        True si la contraseña coincide
    """
    try:
        algorithm, iterations, salt_hex, hash_hex = digest.split("$")
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
        rounds = int(iterations)
        if rounds < 1:
            raise ValueError("iteraciones no válidas")
    except (AttributeError, ValueError):
        logger.warning("Digest de contraseña con formato inválido")
        return False

    candidate = _derive(secret, salt, rounds)
    return hmac.compare_digest(candidate, expected)
