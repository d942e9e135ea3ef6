# src/devshell/core/platform.py
"""
Identificadores de plataforma suportados pelo devshell.

Este módulo define o `PlatformId`, o conjunto fechado de pares
sistema operacional + arquitetura para os quais um ambiente pode ser
composto, e os predicados usados pelos overlays.

Formatos aceitos por `parse_platform`:
    - canônico: "<os>-<arch>"      (ex.: "darwin-aarch64")
    - sistema do gerenciador de pacotes: "<arch>-<os>" (ex.: "aarch64-darwin")

Invariantes:
    - O conjunto de plataformas suportadas é fixo e ordenado
    - Valores fora do conjunto são sempre `ConfigurationError`

Limites explícitos:
    - `detect_host_platform` apenas lê a identificação do processo atual;
      o compositor nunca a chama implicitamente
"""

from __future__ import annotations

import platform as _host
import sys
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import ConfigurationError


class PlatformId(str, Enum):
    """
    Pares sistema operacional + arquitetura suportados.

    Os valores são strings para facilitar serialização e comparação
    com identificadores vindos do avaliador externo.
    """
    LINUX_X86_64 = "linux-x86_64"
    LINUX_AARCH64 = "linux-aarch64"
    DARWIN_X86_64 = "darwin-x86_64"
    DARWIN_AARCH64 = "darwin-aarch64"

    @property
    def os(self) -> str:
        return self.value.split("-", 1)[0]

    @property
    def arch(self) -> str:
        return self.value.split("-", 1)[1]

    @property
    def system(self) -> str:
        """Grafia "<arch>-<os>" usada pelo gerenciador de pacotes."""
        return f"{self.arch}-{self.os}"


SUPPORTED_PLATFORMS: Tuple[PlatformId, ...] = tuple(PlatformId)

_ALIASES: Dict[str, PlatformId] = {}
for _p in PlatformId:
    _ALIASES[_p.value] = _p
    _ALIASES[_p.system] = _p

_MACHINE_ALIASES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
}


def parse_platform(value: Any) -> PlatformId:
    """
    Converte um identificador externo em `PlatformId`.

    Args:
        value: `PlatformId` ou string em formato canônico ou de sistema.

    Returns:
        PlatformId: plataforma suportada correspondente.

    Raises:
        ConfigurationError: se o identificador não for suportado.
    """
    if isinstance(value, PlatformId):
        return value

    if isinstance(value, str):
        found = _ALIASES.get(value.strip())
        if found is not None:
            return found

    supported = ", ".join(p.value for p in SUPPORTED_PLATFORMS)
    raise ConfigurationError(
        f"Plataforma não suportada: {value!r} (suportadas: {supported})",
        identifier=value,
    )


def is_apple_arm(platform: PlatformId) -> bool:
    """Predicado do overlay Apple/ARM."""
    return platform is PlatformId.DARWIN_AARCH64


def detect_host_platform(
    *,
    sys_platform: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformId:
    """
    Identifica a plataforma do processo atual.

    Os parâmetros existem para permitir testes sem depender do host.

    Raises:
        ConfigurationError: se o host não for uma plataforma suportada.
    """
    sys_platform = sys_platform if sys_platform is not None else sys.platform
    machine = machine if machine is not None else _host.machine()

    if sys_platform.startswith("linux"):
        os_name = "linux"
    elif sys_platform == "darwin":
        os_name = "darwin"
    else:
        os_name = sys_platform

    arch = _MACHINE_ALIASES.get(machine.lower(), machine.lower())
    return parse_platform(f"{os_name}-{arch}")
