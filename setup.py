#!/usr/bin/env python

from setuptools import setup

setup(
    name='chez-ordre',
    version='0.1.0',
    description='An ordered task list with a JSON API and a command line.',
    author='Kelvin Hammond',
    author_email='hammond.kelvin@gmail.com',
    url='',
    packages=[
        'chez.ordre',
        'chez.ordre.models',
        'chez.ordre.services',
        'chez.ordre.store',
    ],
    platforms='any',
    python_requires='>=3.8',
    install_requires=[
        'Flask>=2.2',
        'Flask-SQLAlchemy>=3.0',
        'SQLAlchemy>=2.0',
        'arrow>=1.2',
        'click>=8.0',
        'tabulate>=0.9',
    ],
    extras_require={
        'postgres': ['psycopg2-binary'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ordre = chez.ordre.commands:cli',
        ]
    },
)
