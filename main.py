from contextlib import asynccontextmanager
import logging
import time
from typing import List

from fastapi import FastAPI, Depends, Request, Response, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import crud
import models
import schemas
from config import get_settings
from database import engine, get_db
from logging_setup import setup_logging

logger = logging.getLogger(__name__)


def init_db(retries: int, delay: float) -> None:
    """Create missing tables, retrying while the database comes up."""
    for attempt in range(1, retries + 1):
        try:
            models.Base.metadata.create_all(bind=engine)
            logger.info("Database tables created or already exist.")
            return
        except Exception as e:
            if attempt == retries:
                logger.error("Database connection failed after %s attempts", retries)
                raise
            logger.warning(
                "Database connection failed. Retrying... (%s/%s): %s", attempt, retries, e
            )
            time.sleep(delay)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    init_db(settings.db_connect_retries, settings.db_retry_delay)
    yield


app = FastAPI(title="Task API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred"},
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/tasks", response_model=List[schemas.Task])
def read_tasks(db: Session = Depends(get_db)):
    return crud.list_tasks(db)


@app.get("/tasks/{task_id}", response_model=schemas.Task)
def read_task(task_id: int, db: Session = Depends(get_db)):
    task = crud.get_task(db, task_id)
    if task is None:
        raise _not_found()
    return task


@app.post("/tasks", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task(payload: schemas.TaskCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    task = crud.create_task(db, payload)
    response.headers["Location"] = str(request.app.url_path_for("read_task", task_id=task.id))
    return task


@app.put("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_task(task_id: int, payload: schemas.TaskCreate, db: Session = Depends(get_db)):
    if crud.update_task(db, task_id, payload) is None:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/tasks/{task_id}", response_model=schemas.Task)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    deleted = crud.delete_task(db, task_id)
    if deleted is None:
        raise _not_found()
    return deleted
