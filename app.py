import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from store import Task, TaskStore

logger = logging.getLogger(__name__)

app = FastAPI()

# A JSON null body decodes to a zero-valued task.
_TASK_BODY = TypeAdapter(Task | None)


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


class DeleteRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int


@app.get("/tasks")
def list_tasks(store: Annotated[TaskStore, Depends(get_store)]) -> list[Task]:
    return store.list()


@app.post("/tasks/add", status_code=201)
async def add_task(request: Request, store: Annotated[TaskStore, Depends(get_store)]):
    body = await request.body()
    try:
        task = _TASK_BODY.validate_json(body) or Task()
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    store.append(task)
    logger.debug("Task appended over HTTP: id=%s", task.id)
    return Response(status_code=201)


@app.post("/tasks/delete")
async def delete_task(request: Request, store: Annotated[TaskStore, Depends(get_store)]):
    body = await request.body()
    try:
        req = DeleteRequest.model_validate_json(body)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if not store.remove_by_id(req.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    logger.debug("Task %d deleted over HTTP", req.id)
    return {"ok": True}
