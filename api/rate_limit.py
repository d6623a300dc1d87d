"""
Rate limit en memoria por cliente, con ventana fija.

Suficiente para un deploy de instancia única: el estado vive en el proceso y
se pierde al reiniciar. Si se escala horizontalmente, hay que reemplazar
`FixedWindowRateLimiter` por una implementación compartida (ej: Redis) con
la misma interfaz `hit()` / `reset()`.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass
class _Bucket:
    count: int
    reset_at: float


@dataclass(frozen=True)
class RateLimitDecision:
    """
    Resultado de registrar un request.

    Attributes
    ----------
    allowed:
        False si el cliente superó el máximo de la ventana.
    limit:
        Máximo de requests por ventana (header `x-ratelimit-limit`).
    remaining:
        Requests restantes en la ventana actual (nunca negativo).
    retry_after:
        Segundos hasta que se reinicia la ventana (header `retry-after`).
    """

    allowed: bool
    limit: int
    remaining: int
    retry_after: int


class FixedWindowRateLimiter:
    """
    Contador por clave con ventana fija.

    La primera request de una clave abre una ventana de `window_s` segundos;
    las siguientes suman hasta `max_requests`. Pasado el máximo, se rechaza
    hasta que la ventana vence.
    """

    def __init__(
        self,
        max_requests: int,
        window_s: float,
        clock: Callable[[], float] = time.monotonic,
        max_keys: int = 10_000,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests debe ser >= 1")
        if window_s <= 0:
            raise ValueError("window_s debe ser > 0")
        self.max_requests = max_requests
        self.window_s = window_s
        self.clock = clock
        self.max_keys = max_keys
        self._buckets: Dict[str, _Bucket] = {}

    def hit(self, key: str) -> RateLimitDecision:
        now = self.clock()
        bucket = self._buckets.get(key)

        if bucket is None or now >= bucket.reset_at:
            if bucket is None and len(self._buckets) >= self.max_keys:
                self._prune(now)
            bucket = _Bucket(count=0, reset_at=now + self.window_s)
            self._buckets[key] = bucket

        bucket.count += 1
        return RateLimitDecision(
            allowed=bucket.count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - bucket.count),
            retry_after=max(0, math.ceil(bucket.reset_at - now)),
        )

    def reset(self) -> None:
        """Olvida todos los contadores (ej: entre tests)."""
        self._buckets.clear()

    def _prune(self, now: float) -> None:
        expired = [key for key, b in self._buckets.items() if now >= b.reset_at]
        for key in expired:
            del self._buckets[key]

    def __len__(self) -> int:
        return len(self._buckets)
