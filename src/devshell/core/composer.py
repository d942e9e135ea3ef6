# src/devshell/core/composer.py
"""
Environment Composer — composição do descritor de ambiente.

Este módulo implementa `compose`, a única lógica de decisão do devshell:
partindo da definição base, aplica os overlays condicionais à plataforma
em ordem fixa e produz um `EnvironmentDescriptor` completo.

Ordem de composição:
    1. base (bibliotecas, ferramentas, variáveis literais, ativação)
    2. overlay `apple_arm`      → se a plataforma é Apple/ARM
    3. overlay `not_apple_arm`  → caso contrário
    4. variáveis derivadas de localização de pacote (ex.: LIBCLANG_PATH)
    5. hooks de ativação anexados ao script (resolvidos pelo shell)

Decisões arquiteturais:
    - A composição é pura: sem I/O, sem estado, sem chamadas externas
    - A localização de pacotes é delegada a um `resolver`; o padrão emite
      o token de interpolação do gerenciador de pacotes
    - Nomes duplicados são erro, nunca de-duplicação silenciosa

Invariantes:
    - A mesma entrada sempre produz um descritor estruturalmente idêntico
    - Nenhum descritor parcial é retornado em caso de erro
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .config.hashing import compute_config_hash
from .context import ComposeContext
from .definition import EnvironmentDefinition, default_definition
from .errors import ConfigurationError
from .platform import SUPPORTED_PLATFORMS, PlatformId, is_apple_arm, parse_platform
from .types import EnvironmentDescriptor, PackageRef


Resolver = Callable[[PackageRef], str]


def _not_apple_arm(platform: PlatformId) -> bool:
    return not is_apple_arm(platform)


OVERLAY_PREDICATES: Tuple[Tuple[str, Callable[[PlatformId], bool]], ...] = (
    ("apple_arm", is_apple_arm),
    ("not_apple_arm", _not_apple_arm),
)


def interpolation_resolver(ref: PackageRef) -> str:
    """Resolver padrão: delega a localização ao consumidor via `${pacote}`."""
    return "${" + ref.name + "}"


def mapping_resolver(locations: Mapping[str, str]) -> Resolver:
    """
    Cria um resolver a partir de um mapa nome de pacote -> caminho.

    Útil quando o consumidor já materializou o conjunto de pacotes.
    """
    frozen = dict(locations)

    def resolve(ref: PackageRef) -> str:
        if ref.name not in frozen:
            raise ConfigurationError(f"Localização não informada para o pacote: {ref.name}", identifier=ref.name)
        return frozen[ref.name]

    return resolve


def _ensure_unique(refs: Iterable[PackageRef], field_name: str) -> None:
    seen = set()
    for ref in refs:
        if ref.name in seen:
            raise ConfigurationError(f"Pacote duplicado em {field_name}: {ref.name}", identifier=ref.name)
        seen.add(ref.name)


def compose(
    platform: object,
    *,
    definition: Optional[EnvironmentDefinition] = None,
    resolver: Optional[Resolver] = None,
    ctx: Optional[ComposeContext] = None,
) -> EnvironmentDescriptor:
    """
    Compõe o descritor de ambiente para uma plataforma.

    Args:
        platform: `PlatformId` ou identificador textual suportado.
        definition: definição a compor; `None` usa a definição embutida.
        resolver: função `PackageRef -> str` para localizações de pacote.
        ctx: contexto opcional que recebe eventos estruturados.

    Returns:
        EnvironmentDescriptor: descritor completo e imutável.

    Raises:
        ConfigurationError: plataforma não suportada, nomes duplicados ou
            localização de pacote vazia.
    """
    pid = parse_platform(platform)
    definition = definition if definition is not None else default_definition()
    resolver = resolver if resolver is not None else interpolation_resolver

    if ctx is not None:
        ctx.log(event="compose.start", message="Composição iniciada", platform=pid.value)

    libraries: List[PackageRef] = list(definition.libraries)
    tools: List[PackageRef] = list(definition.tools)
    external_tools: List[PackageRef] = []

    for name, predicate in OVERLAY_PREDICATES:
        overlay = definition.overlays[name]

        if not predicate(pid):
            if ctx is not None:
                ctx.log(event="overlay.skipped", message=f"Overlay {name} não se aplica", overlay=name)
            continue

        libraries.extend(overlay.libraries)
        tools.extend(overlay.tools)
        external_tools.extend(overlay.external_tools)
        if ctx is not None:
            ctx.log(
                event="overlay.applied",
                message=f"Overlay {name} aplicado",
                overlay=name,
                libraries=[str(r) for r in overlay.libraries],
                tools=[str(r) for r in overlay.tools],
                external_tools=[str(r) for r in overlay.external_tools],
            )

    _ensure_unique(libraries, "libraryInputs")
    _ensure_unique(tools, "toolInputs")
    _ensure_unique(external_tools, "externalTools")

    variables: Dict[str, str] = dict(definition.variables)
    for pv in definition.package_variables:
        location = resolver(pv.package)
        if not isinstance(location, str) or not location.strip():
            raise ConfigurationError(
                f"Localização vazia para {pv.package.name} (variável {pv.name})",
                identifier=pv.name,
            )
        variables[pv.name] = f"{location}{pv.suffix}"
        if ctx is not None:
            ctx.log(event="variable.resolved", message=f"{pv.name} resolvida", variable=pv.name)

    activation = definition.activation + definition.activation_hooks

    descriptor = EnvironmentDescriptor(
        platform=pid,
        library_inputs=tuple(libraries),
        tool_inputs=tuple(tools),
        activation_script=activation,
        variables=variables,
        external_tools=tuple(external_tools),
    )

    if ctx is not None:
        ctx.log(
            event="compose.done",
            message="Composição concluída",
            platform=pid.value,
            descriptor_hash=compute_descriptor_hash(descriptor),
        )

    return descriptor


def compose_all(
    *,
    definition: Optional[EnvironmentDefinition] = None,
    resolver: Optional[Resolver] = None,
) -> Dict[PlatformId, EnvironmentDescriptor]:
    """Compõe o descritor de cada plataforma suportada, em ordem fixa."""
    definition = definition if definition is not None else default_definition()
    return {
        platform: compose(platform, definition=definition, resolver=resolver)
        for platform in SUPPORTED_PLATFORMS
    }


def compute_descriptor_hash(descriptor: EnvironmentDescriptor) -> str:
    """Hash SHA-256 canônico de um descritor (via `to_dict`)."""
    return compute_config_hash(descriptor.to_dict())
