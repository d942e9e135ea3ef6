# tests/conftest.py
"""
Fixtures compartilhados para testes do devshell.

Este módulo define fixtures reutilizáveis que fornecem:
- plataformas canônicas (Apple/ARM e não Apple/ARM)
- conteúdo YAML/JSON de overrides de definição
- um ComposeContext novo por teste

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos são escritos pelos testes em tmp_path)
    - Dados retornados são determinísticos e isolados
"""

import pytest


APPLE_FRAMEWORK_NAMES = [
    "darwin.apple_sdk.frameworks.QuartzCore",
    "darwin.apple_sdk.frameworks.Foundation",
    "darwin.apple_sdk.frameworks.CoreFoundation",
    "darwin.apple_sdk.frameworks.CoreServices",
    "darwin.apple_sdk.frameworks.Security",
    "darwin.apple_sdk.frameworks.SystemConfiguration",
]

BASE_LIBRARY_NAMES = [
    "clang",
    "llvmPackages_16.libclang",
    "llvmPackages_16.libcxxClang",
    "openssl",
    "libiconv",
    "libclang",
    "lld",
    "cmake",
]

BASE_TOOL_NAMES = [
    "pkg-config",
    "protobuf",
    "brotli",
    "bacon",
    "cargo-nextest",
    "cargo-insta",
]


@pytest.fixture
def apple_framework_names():
    return list(APPLE_FRAMEWORK_NAMES)


@pytest.fixture
def base_library_names():
    return list(BASE_LIBRARY_NAMES)


@pytest.fixture
def base_tool_names():
    return list(BASE_TOOL_NAMES)


@pytest.fixture
def non_apple_platforms():
    from devshell.core.platform import PlatformId

    return [p for p in PlatformId if p is not PlatformId.DARWIN_AARCH64]


@pytest.fixture
def override_add_variable_yaml() -> str:
    """Override local que adiciona uma variável literal e um hook de ativação."""
    return """
base:
  variables:
    RUST_BACKTRACE: "1"
activation_hooks:
  - export DYLD_FALLBACK_LIBRARY_PATH=$(rustc --print sysroot)/lib
  - echo "devshell ready"
"""


@pytest.fixture
def override_duplicate_tool_yaml() -> str:
    """Override local cujo overlay repete uma ferramenta já presente na base."""
    return """
overlays:
  not_apple_arm:
    tools:
      - cargo-about
      - bacon
"""


@pytest.fixture
def ctx():
    from devshell.core.context import ComposeContext

    return ComposeContext(compose_id="test-compose")
