"""
Console menu over a TaskStore.

Prompts are in Portuguese. Only the exact answer "s" counts as yes.
"""
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Callable

from store import TaskStore

logger = logging.getLogger(__name__)

AFFIRMATIVE = "s"
TASK_NUMBER = re.compile(r"[+-]?[0-9]+")


class MenuState(Enum):
    MAIN = "main"
    ADDING = "adding"
    LISTING = "listing"
    COMPLETING = "completing"
    EXITING = "exiting"


CHOICES = {
    "1": MenuState.ADDING,
    "2": MenuState.LISTING,
    "3": MenuState.COMPLETING,
    "4": MenuState.EXITING,
}


class InteractiveMenu:
    def __init__(
        self,
        store: TaskStore,
        tasks_file: Path,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.store = store
        self.tasks_file = Path(tasks_file)
        self.read_line = read_line or input
        self._handlers = {
            MenuState.MAIN: self._main_menu,
            MenuState.ADDING: self._adding,
            MenuState.LISTING: self._listing,
            MenuState.COMPLETING: self._completing,
        }

    def run(self) -> None:
        """Drive the menu until the user exits, then save the store."""
        state = MenuState.MAIN
        while state is not MenuState.EXITING:
            try:
                state = self._handlers[state]()
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, exiting.")
                print()
                state = MenuState.EXITING

        print("Saindo...")
        self.store.save_to(self.tasks_file)

    def _main_menu(self) -> MenuState:
        print("\n-- Menu --")
        print("1. Adicionar tarefa")
        print("2. Exibir tarefas")
        print("3. Completar tarefa")
        print("4. Sair")
        choice = self.read_line("Escolha uma opção: ")
        if choice not in CHOICES:
            print("Opção inválida. Por favor, escolha novamente.")
            return MenuState.MAIN
        return CHOICES[choice]

    def _adding(self) -> MenuState:
        while True:
            text = self.read_line("Digite a tarefa: ")
            self.store.add(text)
            print("Tarefa adicionada com sucesso!")
            if self.read_line("Deseja adicionar mais uma tarefa? (s/n): ") != AFFIRMATIVE:
                return MenuState.MAIN

    def _print_tasks(self, tasks) -> None:
        print("\n--- Tarefas ---")
        for task in tasks:
            print(f"{task.id}. {task.text}")

    def _listing(self) -> MenuState:
        self._print_tasks(self.store.list())
        self.read_line("\nPressione Enter para voltar ao menu...")
        return MenuState.MAIN

    def _completing(self) -> MenuState:
        while True:
            tasks = self.store.list()
            if not tasks:
                print("Nenhuma tarefa para completar.")
                return MenuState.MAIN
            self._print_tasks(tasks)

            raw = self.read_line("Digite o número da tarefa concluída: ")
            if not TASK_NUMBER.fullmatch(raw):
                print("Número de tarefa inválido.")
                continue
            task_id = int(raw)
            # The HTTP side may have changed the list since it was printed;
            # remove_by_id re-checks the range under the lock.
            if not self.store.remove_by_id(task_id):
                print("Número de tarefa inválido.")
                continue
            print("Tarefa concluída e removida da lista.")

            if self.read_line("Deseja completar mais uma tarefa? (s/n): ") != AFFIRMATIVE:
                return MenuState.MAIN
