"""Task API endpoints — chain creation, completion, inboxes.

POST /tasks                      — start a chain (Owner only)
GET  /tasks/{user_id}            — active inbox of a user
PUT  /tasks/{task_id}/complete   — complete a step, hand off to next role
GET  /chains/{chain_id}/tasks    — every task row of one chain
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from taskflow.api.schemas import CompleteTaskRequest, CreateTaskRequest, TaskResponse
from taskflow.config import get_role_flow
from taskflow.db.database import get_session
from taskflow.workflows.engine import TaskFlowEngine, TaskFlowError
from taskflow.workflows.role_flow import RoleFlow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


def get_task_flow(
    session: Session = Depends(get_session),
    role_flow: RoleFlow = Depends(get_role_flow),
) -> TaskFlowEngine:
    return TaskFlowEngine(session, role_flow)


def _http_error(exc: TaskFlowError) -> HTTPException:
    logger.info("Task flow rejected request: %s", exc)
    return HTTPException(status_code=exc.status_code, detail=str(exc))


# === Endpoints ===


@router.post("/tasks", response_model=TaskResponse)
def create_task(
    request: CreateTaskRequest,
    flow: TaskFlowEngine = Depends(get_task_flow),
) -> TaskResponse:
    """Start a chain: the task goes to the holder of the next role."""
    try:
        task = flow.create_initial_task(
            title=request.title,
            description=request.description,
            created_by_user_id=request.created_by_user_id,
        )
    except TaskFlowError as e:
        raise _http_error(e)
    return TaskResponse.from_task(task)


@router.get("/tasks/{user_id}", response_model=list[TaskResponse])
def list_tasks_for_user(
    user_id: int,
    flow: TaskFlowEngine = Depends(get_task_flow),
) -> list[TaskResponse]:
    """Tasks assigned to the user that are not completed yet."""
    return [TaskResponse.from_task(t) for t in flow.get_tasks_for_user(user_id)]


@router.put("/tasks/{task_id}/complete", response_model=TaskResponse)
def complete_task(
    task_id: int,
    request: CompleteTaskRequest,
    flow: TaskFlowEngine = Depends(get_task_flow),
) -> TaskResponse:
    """Complete a task. 404 if missing, 409 if already completed."""
    try:
        task = flow.complete_task(task_id, request.comment)
    except TaskFlowError as e:
        raise _http_error(e)
    return TaskResponse.from_task(task)


@router.get("/chains/{chain_id}/tasks", response_model=list[TaskResponse])
def list_chain_tasks(
    chain_id: str,
    flow: TaskFlowEngine = Depends(get_task_flow),
) -> list[TaskResponse]:
    """All tasks of one chain, oldest first."""
    return [TaskResponse.from_task(t) for t in flow.get_chain(chain_id)]
