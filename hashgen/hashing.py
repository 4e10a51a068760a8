from __future__ import annotations

import logging

import bcrypt

logger = logging.getLogger(__name__)

# Costo fijo (igual que el backend: bcrypt.hash(password, 10))
BCRYPT_ROUNDS = 10

# bcrypt solo usa los primeros 72 bytes (bcryptjs trunca igual)
BCRYPT_MAX_BYTES = 72


class HashComputationError(Exception):
    """bcrypt no pudo generar el hash."""


def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Genera un hash bcrypt con salt aleatorio.
    Dos llamadas con el mismo password dan hashes distintos.
    """
    try:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        hashed = bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise HashComputationError(str(e)) from e

    if not hashed:
        raise HashComputationError("bcrypt returned an empty hash")

    logger.debug("hash generado (rounds=%s, len=%s)", BCRYPT_ROUNDS, len(hashed))
    return hashed


def verify_password(password: str, password_hash: str) -> bool:
    """
    Valida password contra un hash bcrypt existente.
    Un hash mal formado cuenta como no válido.
    """
    try:
        return bcrypt.checkpw(_to_bytes(password), str(password_hash).encode("utf-8"))
    except (ValueError, TypeError):
        logger.debug("hash inválido, no se pudo verificar")
        return False
