# src/devshell/__init__.py
"""
devshell — composição declarativa de ambientes de desenvolvimento.

Este pacote raiz define o namespace público do devshell, um compositor
puro que produz o descritor de um shell de desenvolvimento reprodutível
(toolchain, bibliotecas de sistema, variáveis e script de ativação) para
uma plataforma alvo.

Princípios centrais:
    - A composição é uma função pura da plataforma e da definição
    - Overlays por plataforma são aplicados em ordem fixa e explícita
    - Nenhuma resolução de pacote, build ou execução acontece aqui

Arquitetura em alto nível:
    - core.platform   → identificadores de plataforma suportados
    - core.types      → PackageRef e EnvironmentDescriptor
    - core.definition → definição base e overlays embutidos
    - core.config     → override de definição (YAML/JSON), merge e hashing
    - core.composer   → compose / compose_all
    - export          → renderização para o consumidor (JSON, script sh)

Limites explícitos:
    - Não invoca o gerenciador de pacotes
    - Não executa o shell resultante
    - Não realiza I/O durante a composição
"""

from .core.composer import compose, compose_all, compute_descriptor_hash
from .core.context import ComposeContext
from .core.errors import ConfigurationError, DevShellError
from .core.platform import PlatformId, parse_platform
from .core.types import EnvironmentDescriptor, PackageRef

__all__ = [
    "compose",
    "compose_all",
    "compute_descriptor_hash",
    "ComposeContext",
    "ConfigurationError",
    "DevShellError",
    "EnvironmentDescriptor",
    "PackageRef",
    "PlatformId",
    "parse_platform",
]
