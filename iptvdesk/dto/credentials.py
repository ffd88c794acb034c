import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class Credentials:
    username: Optional[str] = None
    password: Optional[str] = None

    def is_empty(self) -> bool:
        """True when neither field carries a usable value."""
        return not (self.username or self.password)
