from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.exceptions import DataNotFoundError
from ...schemas.task import TaskForm, TaskView
from ...services.task_service import TaskService
from ..deps import get_task_service

router = APIRouter()


# ------------------------------------------------------------------------
# Create a task for an existing person
# ------------------------------------------------------------------------
@router.post(
    "",
    response_model=TaskView,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    payload: TaskForm,
    service: TaskService = Depends(get_task_service),
):
    try:
        return service.create(payload)
    except DataNotFoundError as e:
        raise HTTPException(404, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))


# ------------------------------------------------------------------------
# Filtered queries (declared before /{task_id} so the paths do not collide)
# ------------------------------------------------------------------------
@router.get(
    "/person/{person_id}",
    response_model=List[TaskView],
)
def tasks_by_person(
    person_id: int,
    service: TaskService = Depends(get_task_service),
):
    return service.find_tasks_by_person_id(person_id)


@router.get(
    "/deadline",
    response_model=List[TaskView],
    summary="Tasks Due Between",
    description="""
    Tasks whose deadline falls within `start` and `end`, both inclusive.

    **Query Parameters:**
    - `start`: first day of the range (YYYY-MM-DD)
    - `end`: last day of the range (YYYY-MM-DD)
    """,
)
def tasks_between(
    start: date = Query(...),
    end: date = Query(...),
    service: TaskService = Depends(get_task_service),
):
    if start > end:
        raise HTTPException(400, "start must not be after end")
    return service.find_tasks_between_start_and_end_date(start, end)


@router.get(
    "/unassigned",
    response_model=List[TaskView],
)
def unassigned_tasks(
    service: TaskService = Depends(get_task_service),
):
    return service.find_all_unassigned_todo_items()


@router.get(
    "/overdue",
    response_model=List[TaskView],
    summary="Unfinished And Overdue",
    description="Tasks not marked done whose deadline is before today. A task due today is not overdue.",
)
def overdue_tasks(
    service: TaskService = Depends(get_task_service),
):
    return service.find_all_unfinished_and_overdue()


# ------------------------------------------------------------------------
# Single task
# ------------------------------------------------------------------------
@router.get(
    "/{task_id}",
    response_model=TaskView,
)
def get_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
):
    try:
        return service.find_by_id(task_id)
    except DataNotFoundError as e:
        raise HTTPException(404, str(e))


@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def update_task(
    task_id: int,
    payload: TaskForm,
    service: TaskService = Depends(get_task_service),
):
    # path id wins over any id in the body
    form = payload.model_copy(update={"id": task_id})
    try:
        service.update(form)
    except DataNotFoundError as e:
        raise HTTPException(404, str(e))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
):
    service.delete(task_id)
