import click
from tabulate import tabulate
from .exceptions import BaseServiceException
from .factory import create_app
from .services import TaskService
from .store import SQLTaskStore


def task_service(app):
    store = SQLTaskStore(max_attempts=app.config['ORDER_NUMBER_ATTEMPTS'])
    return TaskService(store=store)


@click.group()
@click.option('--config', default=None,
              help="Import path of a config object, "
                   "e.g. chez.ordre.config.DevelopmentConfig")
@click.pass_context
def cli(ctx, config):
    app = create_app(config=config)
    ctx.obj = app


@cli.command()
@click.pass_obj
def runserver(app):
    app.run()


@cli.command()
@click.pass_obj
@click.pass_context
@click.argument('arguments', nargs=-1)
def add(ctx, app, arguments):
    """Add a task: NAME... cost:AMOUNT due:DATE"""
    with app.app_context():
        ts = task_service(app)
        try:
            task = ts.from_arguments(arguments)
            click.echo('Task {} created at position {}'.format(
                task.id, task.order_number))
        except BaseServiceException as ex:
            ctx.fail(ex.message)


@cli.command(name='list')
@click.pass_obj
def list_tasks(app):
    """List tasks in presentation order"""
    with app.app_context():
        tasks = task_service(app).list()
        if not tasks:
            click.echo("No tasks")
            return

        table = {
            '#': [],
            'Id': [],
            'Name': [],
            'Cost': [],
            'Deadline': [],
        }
        for task in tasks:
            table['#'].append(task.order_number)
            table['Id'].append(task.id)
            table['Name'].append(task.name)
            table['Cost'].append(task.cost)
            table['Deadline'].append(task.deadline.isoformat())
        click.echo(tabulate(table, headers="keys"))


@cli.command()
@click.pass_obj
@click.pass_context
@click.argument('task_id', type=int)
@click.argument('arguments', nargs=-1)
def edit(ctx, app, task_id, arguments):
    """Edit a task, unspecified fields keep their value"""
    with app.app_context():
        ts = task_service(app)
        try:
            task = ts.edit_from_arguments(task_id, arguments)
            click.echo('Task {} updated'.format(task.id))
        except BaseServiceException as ex:
            ctx.fail(ex.message)


@cli.command()
@click.pass_obj
@click.pass_context
@click.argument('task_id', type=int)
def delete(ctx, app, task_id):
    with app.app_context():
        try:
            task_service(app).delete(task_id)
            click.echo('Task {} deleted'.format(task_id))
        except BaseServiceException as ex:
            ctx.fail(ex.message)


@cli.command()
@click.pass_obj
@click.pass_context
@click.argument('task_id', type=int)
@click.argument('target_order', type=int)
def move(ctx, app, task_id, target_order):
    """Swap a task with the one at position TARGET_ORDER"""
    with app.app_context():
        try:
            task_service(app).reorder(task_id, target_order)
        except BaseServiceException as ex:
            ctx.fail(ex.message)
