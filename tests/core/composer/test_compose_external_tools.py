# tests/core/composer/test_compose_external_tools.py
"""
Testes da assimetria de ferramentas com versão fixa em Apple/ARM.

Em Apple/ARM, cargo-instruments e cargo-about não vêm do conjunto de
pacotes: são adquiridas externamente com versão fixa. Nas demais
plataformas, cargo-about vem do conjunto de pacotes, sem pin.
"""

from devshell import PackageRef, PlatformId, compose


def test_apple_arm_lists_pinned_external_tools():
    d = compose(PlatformId.DARWIN_AARCH64)
    assert d.external_tools == (
        PackageRef("cargo-instruments", "0.4.8"),
        PackageRef("cargo-about", "0.6.1"),
    )
    assert d.to_dict()["externalTools"] == ["cargo-instruments@0.4.8", "cargo-about@0.6.1"]


def test_other_platforms_have_no_external_tools(non_apple_platforms):
    for platform in non_apple_platforms:
        d = compose(platform)
        assert d.external_tools == ()
        about = [ref for ref in d.tool_inputs if ref.name == "cargo-about"]
        assert about == [PackageRef("cargo-about")]
        assert about[0].version is None
