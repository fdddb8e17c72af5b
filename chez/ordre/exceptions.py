"""Error kinds raised by the store and the task service."""


class BaseServiceException(Exception):
    """Base for every error raised by chez.ordre"""

    def __init__(self, message=None):
        self.message = message or self.__class__.__doc__
        super(BaseServiceException, self).__init__(self.message)


class TaskException(BaseServiceException):
    """Task error"""


class TaskValidationException(TaskException):
    """Invalid task data"""

    def __init__(self, errors):
        self.errors = dict(errors)
        message = '; '.join(
            '{0}: {1}'.format(k, v) for k, v in sorted(self.errors.items()))
        super(TaskValidationException, self).__init__(
            'Invalid task data: {}'.format(message))


class TaskDuplicateNameException(TaskException):
    """Task with this name already exists"""

    def __init__(self, name):
        self.name = name
        super(TaskDuplicateNameException, self).__init__(
            'Task with this name already exists: {}'.format(name))


class TaskNotFoundException(TaskException):
    """Task not found"""

    def __init__(self, task_id):
        self.task_id = task_id
        super(TaskNotFoundException, self).__init__(
            'Task not found: {}'.format(task_id))


class TaskStorageException(TaskException):
    """Task storage failure"""
