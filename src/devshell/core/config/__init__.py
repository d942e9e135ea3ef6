# src/devshell/core/config/__init__.py

"""
Camada de configuração do devshell.

Este pacote carrega overrides da definição de ambiente, resolve a
definição final via deep-merge determinístico e gera hashes canônicos.

Princípios fundamentais:
    - A definição embutida é a base canônica
    - Overrides são sempre explícitos (arquivo local)
    - A mesma entrada sempre produz a mesma definição final
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefinitionNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_definition, load_definition_dict
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefinitionNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_definition",
    "load_definition_dict",
]
