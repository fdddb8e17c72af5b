
import re
import logging
import datetime
from decimal import Decimal, InvalidOperation
import arrow
from chez.ordre.exceptions import (
    TaskDuplicateNameException, TaskValidationException)
from chez.ordre.models.task import COST_PRECISION, COST_SCALE, NAME_LENGTH
from chez.ordre.store import SQLTaskStore
from .base import BaseService

logger = logging.getLogger(__name__)

COST_LIMIT = Decimal(10) ** (COST_PRECISION - COST_SCALE)
COST_STEP = Decimal(1).scaleb(-COST_SCALE)


class TaskService(BaseService):
    """
    Service to manage the ordered task list

    Validates task data and keeps names unique, everything else is delegated
    to a :class:`~chez.ordre.store.TaskStore`.
    """

    DEFAULT_OPTION_REGEX = re.compile(r'^(\w+):(.*?)$')

    def __init__(self, store=None, option_regex=DEFAULT_OPTION_REGEX):
        self.store = store if store is not None else SQLTaskStore()
        self.option_regex = option_regex

    def list(self):
        return self.store.list()

    def get(self, task_id):
        return self.store.get(task_id)

    def create(self, name, cost, deadline, task_id=None):
        """
        Create a task at the end of the list

        :param task_id: id excluded from the name check, unset for new tasks
        :raises TaskDuplicateNameException: if the name is taken
        """
        if self.store.exists_by_name(name, task_id):
            logger.warning("Refusing to create duplicate task %r", name)
            raise TaskDuplicateNameException(name)
        return self.store.create(name=name, cost=cost, deadline=deadline)

    def update(self, task_id, name, cost, deadline):
        """
        Update a task in place, its position does not change

        :raises TaskDuplicateNameException: if another task has the name
        """
        if self.store.exists_by_name(name, task_id):
            logger.warning("Refusing to rename task %s to duplicate %r",
                           task_id, name)
            raise TaskDuplicateNameException(name)
        return self.store.update(task_id, name=name, cost=cost,
                                 deadline=deadline)

    def delete(self, task_id):
        return self.store.delete(task_id)

    def reorder(self, task_id, target_order):
        """Swap positions with the task at order number `target_order`"""
        return self.store.reorder(task_id, target_order)

    def parse_name(self, value):
        if not isinstance(value, str) or not value.strip():
            raise TaskValidationException({'name': 'is required'})
        name = value.strip()
        if len(name) > NAME_LENGTH:
            raise TaskValidationException(
                {'name': 'must be at most {} characters'.format(NAME_LENGTH)})
        return name

    def parse_cost(self, value):
        """
        Parses a cost, zero is a valid cost

        :returns: non-negative Decimal
        :raises TaskValidationException: if missing, not a number, negative
            or not storable in the cost column
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            raise TaskValidationException({'cost': 'is required'})
        if isinstance(value, bool):
            raise TaskValidationException({'cost': 'must be a number'})

        try:
            cost = Decimal(str(value).strip())
        except InvalidOperation:
            raise TaskValidationException({'cost': 'must be a number'})

        if not cost.is_finite():
            raise TaskValidationException({'cost': 'must be a number'})
        if cost < 0:
            raise TaskValidationException({'cost': 'must not be negative'})
        if cost >= COST_LIMIT:
            raise TaskValidationException(
                {'cost': 'must be less than {}'.format(COST_LIMIT)})
        if cost != cost.quantize(COST_STEP):
            raise TaskValidationException(
                {'cost': 'at most {} decimal places'.format(COST_SCALE)})
        return cost

    def parse_date(self, value):
        """
        Parses a date and returns the value as an arrow type

        Accepts formatted dates, ``today``, ``yesterday``, ``tomorrow`` and
        weekday prefixes, which resolve to the next matching day.

        :returns: arrow object
        :raises TaskValidationException: on parse error
        """
        value = value.strip()

        # try to parse formated date
        try:
            return arrow.get(value)
        except ValueError:  # ParserError and out of range days
            pass

        now = arrow.now()
        shortcuts = {
            'today': now,
            'yesterday': now.shift(days=-1),
            'tomorrow': now.shift(days=1),
        }
        shortcut_value = value.lower()
        if shortcut_value in shortcuts:
            return shortcuts[shortcut_value]

        weekday = value.lower()
        next_week = now.shift(days=8)
        while weekday and now <= next_week:
            if now.format('dddd').lower().startswith(weekday):
                return now
            now = now.shift(days=1)

        raise TaskValidationException(
            {'deadline': 'invalid date format: {}'.format(value)})

    def parse_deadline(self, value):
        """Parses a deadline into a `datetime.date`"""
        if isinstance(value, arrow.Arrow):
            return value.date()
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            raise TaskValidationException({'deadline': 'is required'})
        if not isinstance(value, str):
            raise TaskValidationException({'deadline': 'must be a date'})
        return self.parse_date(value).date()

    def parse_payload(self, payload):
        """
        Validates a ``{name, cost, deadline}`` mapping

        :returns: dict with parsed `name`, `cost` and `deadline`
        :raises TaskValidationException: listing every invalid field
        """
        if not isinstance(payload, dict):
            raise TaskValidationException({'payload': 'must be an object'})

        parsers = (
            ('name', self.parse_name),
            ('cost', self.parse_cost),
            ('deadline', self.parse_deadline),
        )
        data = {}
        errors = {}
        for field, parse in parsers:
            try:
                data[field] = parse(payload.get(field))
            except TaskValidationException as ex:
                errors.update(ex.errors)

        if errors:
            raise TaskValidationException(errors)
        return data

    def from_payload(self, payload):
        """Validate `payload` and create a task from it"""
        return self.create(**self.parse_payload(payload))

    def update_from_payload(self, task_id, payload):
        """Validate `payload` and update task `task_id` with it"""
        return self.update(task_id, **self.parse_payload(payload))

    def parse_cost_option(self, options, name, value):
        """Parses the cost option"""
        if 'cost' in options:
            raise TaskValidationException({'cost': 'defined more than once'})
        options['cost'] = self.parse_cost(value)
        return options

    def parse_due_option(self, options, name, value):
        """Parses the due option into the deadline"""
        if 'deadline' in options:
            raise TaskValidationException(
                {'deadline': 'defined more than once'})
        options['deadline'] = self.parse_deadline(value)
        return options

    def parse_option(self, options, name, value):
        """
        Parses options and sets the proper options in the dictionary used for
        creating tasks

        :raises TaskValidationException: if key is unknown or too ambiguous
        """
        option_types = {
            'cost': self.parse_cost_option,
            'due': self.parse_due_option,
        }
        option_func = None
        for k, v in option_types.items():
            if k.startswith(name.lower()):
                if option_func:
                    raise TaskValidationException(
                        {name: 'option is too ambiguous'})
                option_func = v
        if option_func is None:
            raise TaskValidationException({name: 'unknown option'})
        return option_func(options, name, value)

    def parse_arguments(self, arguments):
        """
        Parse command line arguments and return an options dictionary

        Plain words make up the name, ``cost:`` and ``due:`` set the cost and
        the deadline.
        """
        words = []
        options = {}
        for arg in arguments:
            option_match = self.option_regex.match(arg)
            if option_match:
                options = self.parse_option(
                    options, option_match.group(1), option_match.group(2))
            else:
                words.append(arg)

        if words:
            options['name'] = ' '.join(words)
        return options

    def from_arguments(self, arguments):
        """Parse command line arguments and create a task"""
        return self.from_payload(self.parse_arguments(arguments))

    def edit_from_arguments(self, task_id, arguments):
        """
        Parse command line arguments and update a task

        Fields missing from `arguments` keep their current value.
        """
        task = self.get(task_id)
        payload = {
            'name': task.name,
            'cost': task.cost,
            'deadline': task.deadline,
        }
        payload.update(self.parse_arguments(arguments))
        return self.update_from_payload(task_id, payload)
