
from .base import TaskStore
from .sql import SQLTaskStore

__all__ = [
    'TaskStore',
    'SQLTaskStore',
]
