"""
In-memory task list shared by the console menu and the HTTP handlers.

Every public method takes `_lock` for the in-memory work only. File I/O in
`load_from` / `save_to` happens outside the lock, on a snapshot.
"""
import logging
import threading
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Task(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int = 0
    text: str = ""

    @field_validator("id", "text", mode="before")
    @classmethod
    def _null_is_zero(cls, value, info):
        if value is None:
            return 0 if info.field_name == "id" else ""
        return value


_TASK_LIST = TypeAdapter(list[Task] | None)


class StoreError(Exception):
    """Raised when the tasks file cannot be read, decoded or written."""


class TaskStore:
    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add(self, text: str) -> Task:
        with self._lock:
            task = Task(id=len(self._tasks) + 1, text=text)
            self._tasks.append(task)
        return task

    def append(self, task: Task) -> Task:
        """Append `task` as given, keeping whatever id it carries."""
        with self._lock:
            self._tasks.append(task)
        return task

    def list(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def remove_by_id(self, task_id: int) -> bool:
        """
        Remove the first task whose id is `task_id` and renumber the rest 1..N-1.

        Ids outside [1, N] are rejected without searching, even if an appended
        task happens to carry one.
        """
        with self._lock:
            if task_id < 1 or task_id > len(self._tasks):
                return False
            index = next((i for i, t in enumerate(self._tasks) if t.id == task_id), None)
            if index is None:
                return False
            del self._tasks[index]
            self._tasks = [Task(id=i, text=t.text) for i, t in enumerate(self._tasks, start=1)]
            return True

    def load_from(self, path: Path) -> None:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.info("Arquivo %s não encontrado. Criando um novo...", path)
            with self._lock:
                self._tasks = []
            return
        except OSError as exc:
            raise StoreError(f"Erro ao ler o arquivo {path}: {exc}") from exc

        try:
            tasks = _TASK_LIST.validate_json(raw) or []
        except ValidationError as exc:
            raise StoreError(f"Erro ao decodificar as tarefas: {exc}") from exc

        with self._lock:
            self._tasks = tasks
        logger.info("Loaded %d task(s) from %s", len(tasks), path)

    def save_to(self, path: Path) -> None:
        path = Path(path)
        snapshot = self.list()
        try:
            path.write_bytes(_TASK_LIST.dump_json(snapshot) + b"\n")
        except OSError as exc:
            raise StoreError(f"Erro ao criar o arquivo {path}: {exc}") from exc
        logger.info("Saved %d task(s) to %s", len(snapshot), path)
