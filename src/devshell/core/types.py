# src/devshell/core/types.py
"""
Tipos canônicos de saída do devshell.

Este módulo define as estruturas imutáveis trocadas entre o compositor
e o consumidor externo (gerenciador de pacotes):

    - PackageRef            → referência opaca a um artefato resolvível
    - EnvironmentDescriptor → descritor final do ambiente composto

Princípios fundamentais:
    - Tipos são imutáveis (frozen) e serializáveis
    - Sequências são tuplas; o mapa de variáveis é somente leitura
    - PackageRef nunca é inspecionado além da sua identidade

Invariantes:
    - `PackageRef.name` é sempre uma string não vazia
    - Um descritor nunca é alterado após criado

Limites explícitos:
    - Não compõe ambientes
    - Não valida regras de overlay (responsabilidade do composer)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigurationError
from .platform import PlatformId


@dataclass(frozen=True)
class PackageRef:
    """
    Referência a um artefato de toolchain ou biblioteca.

    Campos:
        - name: caminho de atributo do pacote (ex.: "llvmPackages_16.libclang")
        - version: pin opcional de versão

    A forma textual é "name" ou "name@version".
    """

    name: str
    version: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("PackageRef.name deve ser string não vazia", identifier=self.name)
        if self.version is not None and (not isinstance(self.version, str) or not self.version.strip()):
            raise ConfigurationError(
                f"PackageRef.version inválida para {self.name!r}", identifier=self.version
            )

    @classmethod
    def parse(cls, text: str) -> "PackageRef":
        if not isinstance(text, str):
            raise ConfigurationError(f"PackageRef deve ser string, recebido: {type(text).__name__}", identifier=text)
        name, sep, version = text.strip().partition("@")
        return cls(name=name, version=version if sep else None)

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return f"{self.name}@{self.version}"


@dataclass(frozen=True)
class EnvironmentDescriptor:
    """
    Descritor final e imutável de um ambiente composto.

    Campos:
        - platform: plataforma para a qual o descritor foi composto
        - library_inputs: dependências linkadas/compiladas contra
        - tool_inputs: ferramentas usadas apenas em build
        - activation_script: instruções de shell executadas na ativação
        - variables: variáveis exportadas (nome -> valor resolvido)
        - external_tools: ferramentas com pin adquiridas fora do conjunto
          de pacotes (vazio fora de Apple/ARM)

    Decisões arquiteturais:
        - A instância é criada do zero a cada composição
        - O consumidor a utiliza uma única vez; não há teardown
    """

    platform: PlatformId
    library_inputs: Tuple[PackageRef, ...]
    tool_inputs: Tuple[PackageRef, ...]
    activation_script: Tuple[str, ...]
    variables: Mapping[str, str]
    external_tools: Tuple[PackageRef, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen: a normalização precisa passar por object.__setattr__
        object.__setattr__(self, "library_inputs", tuple(self.library_inputs))
        object.__setattr__(self, "tool_inputs", tuple(self.tool_inputs))
        object.__setattr__(self, "activation_script", tuple(self.activation_script))
        object.__setattr__(self, "external_tools", tuple(self.external_tools))
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    @property
    def library_names(self) -> Tuple[str, ...]:
        return tuple(ref.name for ref in self.library_inputs)

    @property
    def tool_names(self) -> Tuple[str, ...]:
        return tuple(ref.name for ref in self.tool_inputs)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável com os nomes do contrato externo."""
        return {
            "platform": self.platform.value,
            "libraryInputs": [str(ref) for ref in self.library_inputs],
            "toolInputs": [str(ref) for ref in self.tool_inputs],
            "activationScript": list(self.activation_script),
            "variables": dict(self.variables),
            "externalTools": [str(ref) for ref in self.external_tools],
        }
