
import logging
from contextlib import contextmanager
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from chez.ordre.exceptions import TaskNotFoundException, TaskStorageException
from chez.ordre.models import db, Task
from chez.ordre.models.task import INTEGER_MAX, INTEGER_MIN
from .base import TaskStore

logger = logging.getLogger(__name__)


def storable(value):
    """True if `value` fits an integer column"""
    return INTEGER_MIN <= value <= INTEGER_MAX


class SQLTaskStore(TaskStore):
    """Task store on top of a SQLAlchemy session"""

    DEFAULT_MAX_ATTEMPTS = 3

    def __init__(self, session=None, max_attempts=DEFAULT_MAX_ATTEMPTS):
        self.session = session if session is not None else db.session
        self.max_attempts = max_attempts

    @contextmanager
    def transaction(self):
        """
        Commit on success, roll back on any error

        :raises TaskStorageException: wrapping any SQLAlchemy error
        """
        try:
            yield self.session
            self.session.commit()
        except SQLAlchemyError as ex:
            self.session.rollback()
            logger.error("Transaction rolled back: %s", ex)
            raise TaskStorageException(str(ex)) from ex
        except BaseException:
            self.session.rollback()
            logger.debug("Transaction rolled back")
            raise

    def _locked(self, *criteria):
        """Single task matching `criteria`, locked for update"""
        stmt = select(Task).where(*criteria).with_for_update()
        return self.session.execute(stmt).scalar_one_or_none()

    def _move(self, task, order_number):
        task.order_number = order_number
        self.session.flush()

    def list(self):
        try:
            stmt = select(Task).order_by(Task.order_number)
            return list(self.session.execute(stmt).scalars())
        except SQLAlchemyError as ex:
            logger.error("Failed to list tasks: %s", ex)
            raise TaskStorageException(str(ex)) from ex

    def get(self, task_id):
        if not storable(task_id):
            raise TaskNotFoundException(task_id)
        try:
            task = self.session.get(Task, task_id)
        except SQLAlchemyError as ex:
            raise TaskStorageException(str(ex)) from ex
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    def create(self, name, cost, deadline):
        """
        Insert a task, retrying when a concurrent insert took its order number

        :raises TaskStorageException: on a name conflict, or once
            `max_attempts` inserts collided
        """
        attempt = 0
        while True:
            attempt += 1
            task = Task(name=name, cost=cost, deadline=deadline)
            try:
                with self.transaction() as session:
                    session.add(task)
            except TaskStorageException as ex:
                conflict = isinstance(ex.__cause__, IntegrityError)
                if (not conflict or attempt >= self.max_attempts or
                        self.exists_by_name(name)):
                    raise
                logger.warning(
                    "Order number conflict creating %r, retrying (%d/%d)",
                    name, attempt, self.max_attempts)
                continue

            logger.info("Created task %s %r at order %s",
                        task.id, task.name, task.order_number)
            return task

    def update(self, task_id, name, cost, deadline):
        with self.transaction():
            task = self.get(task_id)
            task.name = name
            task.cost = cost
            task.deadline = deadline
        logger.info("Updated task %s", task_id)
        return task

    def delete(self, task_id):
        with self.transaction() as session:
            session.delete(self.get(task_id))
        logger.info("Deleted task %s", task_id)

    def exists_by_name(self, name, exclude_id=None):
        stmt = select(Task.id).where(Task.name == name)
        if exclude_id is not None:
            stmt = stmt.where(Task.id != exclude_id)
        try:
            exists = self.session.execute(
                select(stmt.exists())).scalar()
        except SQLAlchemyError as ex:
            raise TaskStorageException(str(ex)) from ex
        logger.debug("Name %r taken (excluding %s): %s",
                     name, exclude_id, exists)
        return bool(exists)

    def reorder(self, task_id, target_order):
        """
        Swap presentation order with the task at `target_order`

        Both rows are read under ``FOR UPDATE``. The task is first parked at
        ``-id``, a value no live row holds, so the unique constraint on the
        order column holds after every statement.
        """
        with self.transaction():
            task = None
            if storable(task_id):
                task = self._locked(Task.id == task_id)
            if task is None:
                raise TaskNotFoundException(task_id)

            other = None
            if storable(target_order):
                other = self._locked(Task.order_number == target_order)
            if other is None or other.id == task.id:
                logger.debug("No task to swap with at order %s", target_order)
                return

            current_order = task.order_number
            self._move(task, -task.id)
            self._move(other, current_order)
            self._move(task, target_order)

        logger.info("Swapped task %s (order %s) with task %s (order %s)",
                    task_id, target_order, other.id, current_order)
