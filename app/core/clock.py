import time
from datetime import datetime, timezone


class Clock:
    """Relogio do sistema; injetado nos servicos para permitir testes sem espera real."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


system_clock = Clock()
