
from sqlalchemy import sql
from .base import db, Base

NAME_LENGTH = 255
COST_PRECISION = 12
COST_SCALE = 2
# bounds of db.Integer on every supported engine
INTEGER_MIN = -2 ** 31
INTEGER_MAX = 2 ** 31 - 1


def default_order_number(context):
    """Next presentation order: one past the current maximum, 1 if empty"""
    return context.connection.execute(
        sql.select(sql.func.coalesce(sql.func.max(Task.order_number), 0) + 1)
    ).scalar()


class Task(Base):
    name = db.Column(db.Unicode(NAME_LENGTH), nullable=False, unique=True)
    cost = db.Column(db.Numeric(COST_PRECISION, COST_SCALE), nullable=False)
    deadline = db.Column(db.Date, nullable=False)

    order_number = db.Column('presentation_order', db.Integer, nullable=False,
                             unique=True, default=default_order_number)

    def __repr__(self):
        return '<Task {0} #{1} {2!r}>'.format(
            self.id, self.order_number, self.name)
