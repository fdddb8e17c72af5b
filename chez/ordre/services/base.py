
from chez.ordre.exceptions import BaseServiceException


class BaseService(object):
    """Base class for services"""


__all__ = [
    'BaseService',
    'BaseServiceException',
]
