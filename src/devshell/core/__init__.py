"""
Core do devshell.

Este pacote reúne a implementação canônica do compositor de ambientes,
independente de qualquer gerenciador de pacotes concreto.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de efeitos colaterais durante a composição

Componentes principais:
    - platform   → PlatformId e predicados de plataforma
    - types      → tipos imutáveis de saída
    - definition → definição base e overlays
    - config     → carregamento, merge e hashing de overrides
    - composer   → composição do descritor final
    - context    → log estruturado opcional da composição

Limites explícitos:
    - Não resolve pacotes para artefatos concretos
    - Não constrói nem ativa o shell
"""
