# src/devshell/core/context.py
"""
ComposeContext — log estruturado de uma composição.

O ComposeContext é opcional: quando passado ao `compose`, recebe eventos
explícitos descrevendo quais overlays foram aplicados ou pulados e quais
variáveis foram resolvidas. O descritor produzido nunca depende do
contexto.

Princípios fundamentais:
    - Isolamento por composição (cada chamador possui seu próprio contexto)
    - Nenhum estado global ou logger compartilhado
    - A ordem de `events` reflete a ordem real das decisões
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


def _new_compose_id() -> str:
    return uuid4().hex


@dataclass
class ComposeContext:
    """
    Contexto de observabilidade de uma composição.

    Campos canônicos:
    - compose_id: identificador da composição
    - created_at: timestamp UTC de criação do contexto
    - events: log estruturado de eventos
    """

    compose_id: str = field(default_factory=_new_compose_id)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, event: str, level: str = "INFO", message: str, **extra: Any) -> None:
        entry = {
            "compose_id": self.compose_id,
            "event": event,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        entry.update(extra)
        self.events.append(entry)

    def events_of(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] == event]
