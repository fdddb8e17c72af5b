
from .base import db, Base
from .task import Task

__all__ = [
    'db', 'Base',
    'Task',
]
