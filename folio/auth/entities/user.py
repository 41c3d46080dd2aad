from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Principal:
    id: str
    email: str
    name: Optional[str]
    created_at: datetime
