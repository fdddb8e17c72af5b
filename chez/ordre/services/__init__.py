
from .base import BaseService, BaseServiceException
from .task import TaskService

__all__ = [
    'BaseService', 'BaseServiceException',
    'TaskService',
]
