# src/devshell/core/config/errors.py
"""
Exceções canônicas da camada de configuração do devshell.

Este módulo define a hierarquia de exceções usada durante o carregamento
e o merge de arquivos de override da definição do ambiente.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `ConfigError` é um `ConfigurationError`: o chamador de `compose`
      trata uma única família de falhas

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do composer
"""

from ..errors import ConfigurationError


class ConfigError(ConfigurationError):
    """
    Exceção base para erros de carregamento e merge de definição.

    Esta hierarquia permite:
        - captura genérica de erros de arquivo de definição
        - distinção entre falha de arquivo e plataforma não suportada
    """


class DefinitionNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de definição base explícito não existe.

    Decisões arquiteturais:
        - Um `defaults_path` informado é obrigatório
        - O override local, ao contrário, é opcional
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do arquivo não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"variables": {"LIBCLANG_PATH": {...}}}
        - override: {"variables": "x"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
