# src/devshell/core/config/merge.py
"""
Utilitário canônico de deep-merge da definição de ambiente.

Política de merge:
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Listas são sobrescritas por inteiro: um override que declara
`base.tools` substitui a lista base completa, e nunca a concatena.

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários.

    Args:
        base (Dict[str, Any]): Definição base (ex.: defaults embutidos).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo dicionário resultante do merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # None na base aceita qualquer override
        if base_value is None:
            result[key] = deepcopy(override_value)
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}",
                identifier=key,
            )

        # list ou escalar -> sobrescrita total
        result[key] = deepcopy(override_value)

    return result
