# src/devshell/core/errors.py
"""
Exceções canônicas do devshell.

Este módulo define a raiz da hierarquia de exceções do devshell e o
erro de configuração levantado pelo compositor.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de composição são fatais: nenhum descritor parcial é retornado
    - Mensagens nomeiam explicitamente o identificador inválido

Invariantes:
    - Toda exceção do devshell herda de `DevShellError`
    - `ConfigurationError` é a única falha possível de `compose`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos
"""

from __future__ import annotations

from typing import Any, Optional


class DevShellError(Exception):
    """Exceção base do devshell."""


class ConfigurationError(DevShellError):
    """
    Exceção levantada quando a composição não pode produzir um descritor válido.

    Casos cobertos:
        - PlatformId não suportado
        - definição base/overlay estruturalmente inválida
        - nomes de pacote duplicados após a composição
        - variável resolvida com valor vazio

    Atributos:
        identifier: o valor que causou a falha (ex.: a plataforma não
            suportada), quando houver um.

    O chamador (avaliador externo) deve abortar a construção do ambiente
    e reportar o erro ao usuário final.
    """

    def __init__(self, message: str, *, identifier: Optional[Any] = None) -> None:
        super().__init__(message)
        self.identifier = identifier
