# src/devshell/core/definition.py
"""
Definição canônica do ambiente — base comum e overlays por plataforma.

Este módulo contém a definição embutida do shell de desenvolvimento
(toolchain Rust/LLVM, bibliotecas nativas e ferramentas auxiliares) e a
sua forma validada, `EnvironmentDefinition`, consumida pelo composer.

A definição é um dicionário puro com o mesmo formato aceito pelos
arquivos de override (YAML/JSON):

    base:
      libraries:  [PackageRef, ...]
      tools:      [PackageRef, ...]
      variables:  {NOME: valor literal}
      activation: [instrução sh, ...]
    overlays:
      apple_arm:     {libraries, tools, external_tools}
      not_apple_arm: {libraries, tools, external_tools}
    package_variables:
      NOME: {package: PackageRef, suffix: "/lib"}
    activation_hooks: [instrução sh, ...]

Os nomes de overlay são fechados e ambos obrigatórios: cada um corresponde
a um predicado fixo no composer, aplicado sempre na mesma ordem.
LIBCLANG_PATH é obrigatória em `package_variables`.

Invariantes:
    - A definição embutida é o contrato de compatibilidade (nomes de
      pacotes, pertencimento condicional e nomes de variáveis)
    - `validate_definition` nunca muta o input
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .errors import ConfigurationError
from .types import PackageRef


LLVM_PACKAGES = "llvmPackages_16"

# Exatamente seis frameworks no contrato. MetalPerformanceShaders fica fora
# da lista embutida; quem precisar dele o declara em
# `overlays.apple_arm.libraries` num override local.
APPLE_FRAMEWORKS: Tuple[str, ...] = (
    "darwin.apple_sdk.frameworks.QuartzCore",
    "darwin.apple_sdk.frameworks.Foundation",
    "darwin.apple_sdk.frameworks.CoreFoundation",
    "darwin.apple_sdk.frameworks.CoreServices",
    "darwin.apple_sdk.frameworks.Security",
    "darwin.apple_sdk.frameworks.SystemConfiguration",
)

# Disponível no conjunto de pacotes em todas as plataformas exceto Apple/ARM.
NON_APPLE_ARM_TOOL = "cargo-about"

# Em Apple/ARM essas ferramentas vêm de `cargo install`, com versão fixa.
APPLE_ARM_EXTERNAL_TOOLS: Tuple[str, ...] = (
    "cargo-instruments@0.4.8",
    "cargo-about@0.6.1",
)

DYLD_FALLBACK_HOOK = "export DYLD_FALLBACK_LIBRARY_PATH=$(rustc --print sysroot)/lib"

OVERLAY_NAMES: Tuple[str, ...] = ("apple_arm", "not_apple_arm")

REQUIRED_PACKAGE_VARIABLES: Tuple[str, ...] = ("LIBCLANG_PATH",)

DEFAULT_DEFINITION: Dict[str, Any] = {
    "base": {
        "libraries": [
            "clang",
            f"{LLVM_PACKAGES}.libclang",
            f"{LLVM_PACKAGES}.libcxxClang",
            "openssl",
            "libiconv",
            "libclang",
            "lld",
            "cmake",
        ],
        "tools": [
            "pkg-config",
            "protobuf",
            "brotli",
            "bacon",
            "cargo-nextest",
            "cargo-insta",
        ],
        "variables": {},
        "activation": [],
    },
    "overlays": {
        "apple_arm": {
            "libraries": list(APPLE_FRAMEWORKS),
            "tools": [],
            "external_tools": list(APPLE_ARM_EXTERNAL_TOOLS),
        },
        "not_apple_arm": {
            "libraries": [],
            "tools": [NON_APPLE_ARM_TOOL],
            "external_tools": [],
        },
    },
    "package_variables": {
        "LIBCLANG_PATH": {
            "package": f"{LLVM_PACKAGES}.libclang.lib",
            "suffix": "/lib",
        },
    },
    "activation_hooks": [DYLD_FALLBACK_HOOK],
}


@dataclass(frozen=True)
class Overlay:
    """Modificação condicional aplicada ao ambiente base."""

    name: str
    libraries: Tuple[PackageRef, ...] = ()
    tools: Tuple[PackageRef, ...] = ()
    external_tools: Tuple[PackageRef, ...] = ()


@dataclass(frozen=True)
class PackageVariable:
    """Variável cujo valor é a localização resolvida de um pacote + sufixo."""

    name: str
    package: PackageRef
    suffix: str = ""


@dataclass(frozen=True)
class EnvironmentDefinition:
    """
    Representação validada e imutável de uma definição de ambiente.

    Campos:
        - libraries / tools: listas base, em ordem de declaração
        - variables: variáveis literais da base
        - activation: script de ativação da base
        - overlays: overlays por nome (apenas nomes de `OVERLAY_NAMES`)
        - package_variables: variáveis derivadas de localização de pacote
        - activation_hooks: instruções anexadas após os overlays
    """

    libraries: Tuple[PackageRef, ...]
    tools: Tuple[PackageRef, ...]
    variables: Mapping[str, str]
    activation: Tuple[str, ...]
    overlays: Mapping[str, Overlay]
    package_variables: Tuple[PackageVariable, ...]
    activation_hooks: Tuple[str, ...]


def _expect(cond: bool, msg: str, identifier: Any = None) -> None:
    if not cond:
        raise ConfigurationError(msg, identifier=identifier)


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _refs(value: Any, path: str) -> Tuple[PackageRef, ...]:
    if value is None:
        return ()
    _expect(isinstance(value, list), f"{path} deve ser uma lista", identifier=path)
    refs: List[PackageRef] = []
    for i, raw in enumerate(value):
        _expect(_is_non_empty_str(raw), f"{path}[{i}] deve ser string não vazia", identifier=raw)
        refs.append(PackageRef.parse(raw))
    return tuple(refs)


def _statements(value: Any, path: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    _expect(isinstance(value, list), f"{path} deve ser uma lista", identifier=path)
    for i, line in enumerate(value):
        _expect(_is_non_empty_str(line), f"{path}[{i}] deve ser instrução não vazia", identifier=line)
    return tuple(value)


def _variable_name(name: Any, path: str) -> str:
    _expect(_is_non_empty_str(name), f"{path}: nome de variável inválido", identifier=name)
    _expect("=" not in name and not any(c.isspace() for c in name),
            f"{path}: nome de variável inválido: {name!r}", identifier=name)
    return name


def validate_definition(data: Any) -> EnvironmentDefinition:
    """
    Valida e materializa uma definição de ambiente.

    Args:
        data: dicionário no formato de `DEFAULT_DEFINITION`.

    Returns:
        EnvironmentDefinition: definição validada.

    Raises:
        ConfigurationError: se a estrutura for inválida, referenciar
            overlays desconhecidos, omitir algum overlay de `OVERLAY_NAMES`
            ou omitir uma variável de `REQUIRED_PACKAGE_VARIABLES`.
    """
    _expect(isinstance(data, dict), "Definição deve ser um mapping/dict")

    base = data.get("base")
    _expect(isinstance(base, dict), "base deve ser um mapping", identifier="base")

    variables = base.get("variables") or {}
    _expect(isinstance(variables, dict), "base.variables deve ser um mapping", identifier="base.variables")
    literal_vars: Dict[str, str] = {}
    for name, value in variables.items():
        _variable_name(name, "base.variables")
        _expect(isinstance(value, str), f"base.variables.{name} deve ser string", identifier=name)
        literal_vars[name] = value

    overlays_raw = data.get("overlays") or {}
    _expect(isinstance(overlays_raw, dict), "overlays deve ser um mapping", identifier="overlays")
    overlays: Dict[str, Overlay] = {}
    for name, spec in overlays_raw.items():
        _expect(name in OVERLAY_NAMES, f"overlay desconhecido: {name} (conhecidos: {list(OVERLAY_NAMES)})",
                identifier=name)
        _expect(isinstance(spec, dict), f"overlays.{name} deve ser um mapping", identifier=name)
        overlays[name] = Overlay(
            name=name,
            libraries=_refs(spec.get("libraries"), f"overlays.{name}.libraries"),
            tools=_refs(spec.get("tools"), f"overlays.{name}.tools"),
            external_tools=_refs(spec.get("external_tools"), f"overlays.{name}.external_tools"),
        )
    for name in OVERLAY_NAMES:
        _expect(name in overlays, f"overlay obrigatório ausente: {name}", identifier=name)

    pkg_vars_raw = data.get("package_variables") or {}
    _expect(isinstance(pkg_vars_raw, dict), "package_variables deve ser um mapping",
            identifier="package_variables")
    package_variables: List[PackageVariable] = []
    for name, spec in pkg_vars_raw.items():
        _variable_name(name, "package_variables")
        _expect(name not in literal_vars, f"variável declarada duas vezes: {name}", identifier=name)
        _expect(isinstance(spec, dict), f"package_variables.{name} deve ser um mapping", identifier=name)
        package = spec.get("package")
        _expect(_is_non_empty_str(package), f"package_variables.{name}.package é obrigatório", identifier=name)
        suffix = spec.get("suffix", "")
        _expect(isinstance(suffix, str), f"package_variables.{name}.suffix deve ser string", identifier=name)
        package_variables.append(PackageVariable(name=name, package=PackageRef.parse(package), suffix=suffix))
    declared = {pv.name for pv in package_variables}
    for name in REQUIRED_PACKAGE_VARIABLES:
        _expect(name in declared, f"package_variables obrigatória ausente: {name}", identifier=name)

    return EnvironmentDefinition(
        libraries=_refs(base.get("libraries"), "base.libraries"),
        tools=_refs(base.get("tools"), "base.tools"),
        variables=MappingProxyType(literal_vars),
        activation=_statements(base.get("activation"), "base.activation"),
        overlays=MappingProxyType(overlays),
        package_variables=tuple(package_variables),
        activation_hooks=_statements(data.get("activation_hooks"), "activation_hooks"),
    )


def default_definition() -> EnvironmentDefinition:
    """Definição embutida, validada."""
    return validate_definition(DEFAULT_DEFINITION)
