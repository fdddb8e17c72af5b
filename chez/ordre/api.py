
import logging
from flask import Blueprint, current_app, jsonify, request
from .exceptions import (
    TaskDuplicateNameException, TaskNotFoundException, TaskStorageException,
    TaskValidationException)
from .services import TaskService
from .store import SQLTaskStore

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__)


def respond(status_code, message, data=None):
    """JSON envelope shared by every response"""
    body = {'statusCode': status_code, 'message': message}
    if data is not None:
        body['data'] = data
    return jsonify(body), status_code


def task_to_dict(task):
    return {
        'id': task.id,
        'name': task.name,
        'cost': float(task.cost),
        'deadline': task.deadline.isoformat(),
        'order_number': task.order_number,
    }


def task_service():
    store = SQLTaskStore(
        max_attempts=current_app.config['ORDER_NUMBER_ATTEMPTS'])
    return TaskService(store=store)


def json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise TaskValidationException({'body': 'must be a JSON object'})
    return payload


@api.errorhandler(TaskValidationException)
def handle_validation(ex):
    return respond(400, ex.message, {'errors': ex.errors})


@api.errorhandler(TaskDuplicateNameException)
def handle_duplicate_name(ex):
    return respond(400, ex.message)


@api.errorhandler(TaskNotFoundException)
def handle_not_found(ex):
    return respond(404, ex.message)


@api.errorhandler(TaskStorageException)
def handle_storage(ex):
    logger.exception("Storage failure handling %s %s",
                     request.method, request.path)
    return respond(500, 'Internal storage error')


@api.route('/tasks', methods=['GET'])
def list_tasks():
    tasks = task_service().list()
    return respond(200, 'Tasks retrieved successfully',
                   [task_to_dict(t) for t in tasks])


@api.route('/tasks/<int:task_id>', methods=['GET'])
def get_task(task_id):
    task = task_service().get(task_id)
    return respond(200, 'Task retrieved successfully', task_to_dict(task))


@api.route('/tasks', methods=['POST'])
def create_task():
    task = task_service().from_payload(json_body())
    return respond(201, 'Task created successfully', task_to_dict(task))


@api.route('/tasks/<int:task_id>', methods=['PUT'])
def update_task(task_id):
    task = task_service().update_from_payload(task_id, json_body())
    return respond(200, 'Task updated successfully', task_to_dict(task))


@api.route('/tasks/<int:task_id>', methods=['DELETE'])
def delete_task(task_id):
    task_service().delete(task_id)
    return respond(200, 'Task deleted successfully')


@api.route('/tasks/<int:task_id>/reorder', methods=['POST'])
def reorder_task(task_id):
    order = json_body().get('order')
    if isinstance(order, bool) or not isinstance(order, int):
        raise TaskValidationException({'order': 'must be an integer'})
    task_service().reorder(task_id, order)
    return respond(200, 'Task reordered successfully')
