from __future__ import annotations

from typing import Optional, Protocol

from .model import Interpreter


class InterpreterRepository(Protocol):
    def get_by_id(self, interpreter_id: int) -> Optional[Interpreter]:
        raise NotImplementedError
