from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TransportFailure:
    url: str
    reason: str
    params: dict[str, Any] = field(default_factory=dict)
