# src/devshell/core/config/loader.py
"""
Loader canônico da definição de ambiente do devshell.

A definição efetiva é resolvida a partir de:
    - uma base: a definição embutida ou um arquivo `defaults_path`
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Validar o tipo raiz (dict)
    - Resolver a definição final via deep-merge determinístico
    - Materializar o resultado em `EnvironmentDefinition`

Invariantes:
    - Um `defaults_path` informado é obrigatório
    - Um `local_path` inexistente é ignorado
    - Overrides nunca mutam a base

Limites explícitos:
    - Não compõe o descritor
    - Não persiste a definição ou seu hash
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from ..definition import DEFAULT_DEFINITION, EnvironmentDefinition, validate_definition
from .merge import deep_merge
from .errors import (
    DefinitionNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de definição e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefinitionNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefinitionNotFoundError(f"Arquivo de definição não encontrado: {path}", identifier=str(path))

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}", identifier=path.suffix)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Definição raiz deve ser dict, recebido: {type(data).__name__}",
            identifier=str(path),
        )

    return data


def load_definition_dict(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Resolve a definição efetiva como dicionário puro, sem validação semântica.

    Args:
        defaults_path: arquivo base; `None` usa a definição embutida.
        local_path: arquivo de override opcional.

    Returns:
        Dict[str, Any]: definição resolvida.
    """
    if defaults_path is None:
        effective: Dict[str, Any] = deep_merge(DEFAULT_DEFINITION, {})
    else:
        effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_definition(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> EnvironmentDefinition:
    """
    Carrega, resolve e valida a definição de ambiente.

    Raises:
        DefinitionNotFoundError: Se `defaults_path` não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        ConfigurationError: Se a definição resolvida for inválida.
    """
    return validate_definition(
        load_definition_dict(defaults_path=defaults_path, local_path=local_path)
    )
