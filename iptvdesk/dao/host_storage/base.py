from abc import ABC, abstractmethod
from typing import Optional


class BaseHostStorage(ABC):
    @abstractmethod
    def get_selected_host(self) -> Optional[str]:
        pass

    @abstractmethod
    def save_selected_host(self, host: str) -> None:
        pass
