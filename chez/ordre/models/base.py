
from sqlalchemy.orm import declared_attr
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Base(db.Model):
    """Base model class"""
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True)

    @declared_attr
    def __tablename__(cls):
        """ Set __tablename__ to equal the class name to lower """
        return cls.__name__.lower()
