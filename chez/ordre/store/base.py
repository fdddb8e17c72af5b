
import abc


class TaskStore(abc.ABC):
    """
    Persistence contract for tasks.

    Implementations own the presentation order: ``create`` assigns the next
    order number and ``reorder`` is the only operation that changes it.
    """

    @abc.abstractmethod
    def list(self):
        """Return every task, ascending by order number"""

    @abc.abstractmethod
    def get(self, task_id):
        """
        Return the task with `task_id`

        :raises TaskNotFoundException: if there is no such task
        """

    @abc.abstractmethod
    def create(self, name, cost, deadline):
        """Insert a task at the end of the presentation order"""

    @abc.abstractmethod
    def update(self, task_id, name, cost, deadline):
        """
        Change name, cost and deadline of a task; order number is untouched

        :raises TaskNotFoundException: if there is no such task
        """

    @abc.abstractmethod
    def delete(self, task_id):
        """
        Remove a task; remaining order numbers are not compacted

        :raises TaskNotFoundException: if there is no such task
        """

    @abc.abstractmethod
    def exists_by_name(self, name, exclude_id=None):
        """True if a task other than `exclude_id` is called `name`"""

    @abc.abstractmethod
    def reorder(self, task_id, target_order):
        """
        Swap order numbers with the task currently at `target_order`

        Nothing happens when no task holds `target_order`.

        :raises TaskNotFoundException: if `task_id` does not exist
        """
