# tests/core/composer/test_compose_scenarios.py
"""
Cenários canônicos do Environment Composer.

Os testes asseguram que:
- Apple/ARM recebe exatamente os seis frameworks Apple e não recebe cargo-about
- plataformas não Apple/ARM recebem cargo-about e apenas as bibliotecas base
- LIBCLANG_PATH está sempre presente
- a instrução de ativação é emitida literalmente
"""

import pytest

from devshell import ConfigurationError, PlatformId, compose
from devshell.core.definition import DYLD_FALLBACK_HOOK, NON_APPLE_ARM_TOOL


def test_darwin_aarch64_scenario(apple_framework_names, base_library_names, base_tool_names):
    """
    Verifica o cenário `compose("darwin-aarch64")`.

    Invariantes:
        - toolInputs exclui a ferramenta reservada a não Apple/ARM
        - libraryInputs = bibliotecas base + seis frameworks Apple, nessa ordem
        - variables contém LIBCLANG_PATH
    """
    d = compose("darwin-aarch64")

    assert d.platform is PlatformId.DARWIN_AARCH64
    assert NON_APPLE_ARM_TOOL not in d.tool_names
    assert list(d.tool_names) == base_tool_names
    assert list(d.library_names) == base_library_names + apple_framework_names
    assert len([n for n in d.library_names if n.startswith("darwin.apple_sdk.frameworks.")]) == 6
    assert "LIBCLANG_PATH" in d.variables


def test_linux_x86_64_scenario(base_library_names, base_tool_names):
    """
    Verifica o cenário `compose("linux-x86_64")`.

    Invariantes:
        - toolInputs = ferramentas base + cargo-about
        - libraryInputs = apenas bibliotecas base
    """
    d = compose("linux-x86_64")

    assert list(d.tool_names) == base_tool_names + [NON_APPLE_ARM_TOOL]
    assert list(d.library_names) == base_library_names
    assert d.external_tools == ()


def test_non_apple_arm_platforms_get_extra_tool(non_apple_platforms, apple_framework_names):
    for platform in non_apple_platforms:
        d = compose(platform)
        assert NON_APPLE_ARM_TOOL in d.tool_names
        assert not set(apple_framework_names) & set(d.library_names)


def test_darwin_x86_64_is_not_apple_arm(apple_framework_names):
    """Intel macOS não é Apple/ARM: recebe cargo-about e nenhum framework."""
    d = compose(PlatformId.DARWIN_X86_64)
    assert NON_APPLE_ARM_TOOL in d.tool_names
    assert not set(apple_framework_names) & set(d.library_names)


def test_unknown_platform_raises_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        compose("unknown-platform")

    assert excinfo.value.identifier == "unknown-platform"
    assert "unknown-platform" in str(excinfo.value)


@pytest.mark.parametrize("value", ["", "windows-x86_64", "darwin", None, 42])
def test_invalid_platform_values_raise(value):
    with pytest.raises(ConfigurationError):
        compose(value)


def test_libclang_path_interpolates_libclang_location():
    d = compose("linux-aarch64")
    assert d.variables["LIBCLANG_PATH"] == "${llvmPackages_16.libclang.lib}/lib"


def test_activation_statement_is_literal_and_last():
    """
    Verifica que o fallback de bibliotecas dinâmicas é emitido como linha de script.

    O caminho real só é conhecido quando o shell inicia; o composer nunca
    o calcula.
    """
    for platform in PlatformId:
        d = compose(platform)
        assert d.activation_script[-1] == DYLD_FALLBACK_HOOK
        assert "$(rustc --print sysroot)" in d.activation_script[-1]
