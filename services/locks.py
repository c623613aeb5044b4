"""
Locks por prateleira para que a troca de ocupação das posições
seja linearizável dentro do processo
"""
import threading
from contextlib import nullcontext
from typing import Dict, Optional


class ShelfLocks:
    """
    Um threading.Lock por shelf_id, criado sob demanda e nunca descartado:
    ids de prateleiras apagadas podem ser reutilizados pelo banco
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[int, threading.Lock] = {}

    def for_shelf(self, shelf_id: Optional[int]):
        # Material sem prateleira não mexe em ocupação
        if shelf_id is None:
            return nullcontext()
        with self._guard:
            lock = self._locks.get(shelf_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[shelf_id] = lock
            return lock


shelf_locks = ShelfLocks()
