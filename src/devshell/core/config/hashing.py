# src/devshell/core/config/hashing.py
"""
Hashing canônico de estruturas do devshell.

O hash representa a identidade estrutural de uma definição ou de um
descritor serializado, e é usado para verificar reprodutibilidade:
a mesma entrada de composição sempre gera o mesmo hash.

Política de hashing:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Independente da ordem original das chaves
"""

import hashlib
import json
from typing import Any, Dict


def canonical_json(data: Dict[str, Any]) -> str:
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de um dicionário.

    Args:
        config (Dict[str, Any]): Estrutura serializável em JSON.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    return hashlib.sha256(canonical_json(config).encode("utf-8")).hexdigest()
