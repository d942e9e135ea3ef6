# src/devshell/export/shell_script.py
"""
Renderização do descritor para o consumidor externo.

Formatos:
    - JSON canônico (chaves ordenadas), para o gerenciador de pacotes
    - script POSIX `sh` de ativação: exporta `variables` e executa
      `activation_script` na ordem declarada

As instruções de ativação são emitidas literalmente: valores como
`$(rustc --print sysroot)` são resolvidos pelo shell, na ativação.

O script só é executável com localizações de pacote já resolvidas
(ex.: `mapping_resolver`). Tokens `${pacote}` do resolver padrão não são
expandidos pelo shell; com `allow_placeholders=True` o resultado é apenas
um template para o gerenciador de pacotes preencher.
"""

from __future__ import annotations

import json
import shlex
from typing import List

from ..core.errors import ConfigurationError
from ..core.types import EnvironmentDescriptor


SCRIPT_HEADER = "#!/bin/sh"

PLACEHOLDER_PREFIX = "${"


def descriptor_to_json(descriptor: EnvironmentDescriptor, *, indent: int = 2) -> str:
    return json.dumps(descriptor.to_dict(), sort_keys=True, indent=indent, ensure_ascii=False)


def render_activation_script(
    descriptor: EnvironmentDescriptor,
    *,
    allow_placeholders: bool = False,
) -> str:
    """
    Gera o script de ativação do ambiente.

    Variáveis são exportadas em ordem alfabética antes das instruções de
    ativação, que mantêm a ordem do descritor.

    Args:
        descriptor: descritor composto.
        allow_placeholders: aceita valores com tokens `${pacote}` não
            resolvidos; a saída passa a ser um template.

    Raises:
        ConfigurationError: se uma variável contém token não resolvido e
            `allow_placeholders` é falso.
    """
    lines: List[str] = [
        SCRIPT_HEADER,
        f"# devshell: {descriptor.platform.value}",
    ]
    for name in sorted(descriptor.variables):
        value = descriptor.variables[name]
        if PLACEHOLDER_PREFIX in value and not allow_placeholders:
            raise ConfigurationError(
                f"Variável {name} contém localização não resolvida: {value}",
                identifier=name,
            )
        lines.append(f"export {name}={shlex.quote(value)}")
    lines.extend(descriptor.activation_script)
    return "\n".join(lines) + "\n"
