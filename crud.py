"""Task record store: CRUD against the ``tasks`` table."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

import models
import schemas

logger = logging.getLogger(__name__)

# Bounds of a signed 64-bit INTEGER primary key.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _stored_due_date(value: datetime) -> datetime:
    # Column holds naive UTC.
    return schemas.to_utc(value).replace(tzinfo=None)


def list_tasks(db: Session) -> List[models.Task]:
    return db.query(models.Task).order_by(models.Task.id).all()


def get_task(db: Session, task_id: int) -> Optional[models.Task]:
    if not MIN_ID <= task_id <= MAX_ID:
        logger.debug("Task id %s out of range", task_id)
        return None
    task = db.get(models.Task, task_id)
    if task is None:
        logger.debug("Task %s not found", task_id)
    return task


def create_task(db: Session, payload: schemas.TaskCreate) -> models.Task:
    new_task = models.Task(
        title=payload.title,
        description=payload.description,
        due_date=_stored_due_date(payload.due_date),
        completed=payload.completed,
    )
    db.add(new_task)
    db.commit()
    db.refresh(new_task)
    logger.info("Created task id=%s title=%r", new_task.id, new_task.title)
    return new_task


def update_task(db: Session, task_id: int, payload: schemas.TaskCreate) -> Optional[models.Task]:
    """Overwrite every field except ``id``. Returns None when the task is absent."""
    task = get_task(db, task_id)
    if task is None:
        return None

    task.title = payload.title
    task.description = payload.description
    task.due_date = _stored_due_date(payload.due_date)
    task.completed = payload.completed
    db.commit()
    db.refresh(task)
    logger.info("Updated task id=%s", task_id)
    return task


def delete_task(db: Session, task_id: int) -> Optional[schemas.Task]:
    """Remove the task and return its state as it was before deletion."""
    task = get_task(db, task_id)
    if task is None:
        return None

    # Snapshot before commit; the ORM instance is detached afterwards.
    deleted = schemas.Task.model_validate(task)
    db.delete(task)
    db.commit()
    logger.info("Deleted task id=%s", task_id)
    return deleted
