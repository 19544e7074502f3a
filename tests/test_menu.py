import json

import pytest

from menu import InteractiveMenu
from store import Task, TaskStore


class ScriptedInput:
    """Feeds canned lines to the menu and records every prompt it shows."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def run_menu(store, tasks_file, *lines):
    script = ScriptedInput(*lines)
    InteractiveMenu(store, tasks_file, read_line=script).run()
    return script


def test_exit_saves_and_stops(store, tasks_file, capsys):
    store.add("keep me")
    script = run_menu(store, tasks_file, "4")

    assert "Saindo..." in capsys.readouterr().out
    assert json.loads(tasks_file.read_text()) == [{"id": 1, "text": "keep me"}]
    assert script.prompts == ["Escolha uma opção: "]


def test_add_multiple_tasks(store, tasks_file, capsys):
    run_menu(store, tasks_file, "1", "buy milk", "s", "walk dog", "n", "4")

    assert store.list() == [Task(id=1, text="buy milk"), Task(id=2, text="walk dog")]
    assert capsys.readouterr().out.count("Tarefa adicionada com sucesso!") == 2


def test_only_exact_s_continues_adding(store, tasks_file):
    run_menu(store, tasks_file, "1", "a", "S", "4")
    assert len(store) == 1

    other = TaskStore()
    run_menu(other, tasks_file, "1", "a", "sim", "4")
    assert len(other) == 1


def test_list_shows_tasks_and_waits_for_enter(store, tasks_file, capsys):
    store.add("buy milk")
    store.add("walk dog")
    script = run_menu(store, tasks_file, "2", "", "4")

    out = capsys.readouterr().out
    assert "--- Tarefas ---" in out
    assert "1. buy milk" in out
    assert "2. walk dog" in out
    assert "\nPressione Enter para voltar ao menu..." in script.prompts


@pytest.mark.parametrize("choice", ["0", "5", "x", "", "1 "])
def test_invalid_choice_returns_to_main_menu(store, tasks_file, capsys, choice):
    script = run_menu(store, tasks_file, choice, "4")

    assert "Opção inválida. Por favor, escolha novamente." in capsys.readouterr().out
    assert script.prompts == ["Escolha uma opção: ", "Escolha uma opção: "]
    assert store.list() == []


def test_complete_removes_and_renumbers(store, tasks_file, capsys):
    for name in ("a", "b", "c"):
        store.add(name)
    run_menu(store, tasks_file, "3", "1", "n", "4")

    assert "Tarefa concluída e removida da lista." in capsys.readouterr().out
    assert store.list() == [Task(id=1, text="b"), Task(id=2, text="c")]


def test_complete_several_in_a_row(store, tasks_file):
    for name in ("a", "b", "c"):
        store.add(name)
    run_menu(store, tasks_file, "3", "2", "s", "1", "n", "4")
    assert store.list() == [Task(id=1, text="c")]


@pytest.mark.parametrize("bad", ["abc", "0", "4", "-1", "", " 2 ", "1_0", "２", "2.0"])
def test_complete_rejects_bad_ids_and_reprompts(store, tasks_file, capsys, bad):
    for name in ("a", "b", "c"):
        store.add(name)
    script = run_menu(store, tasks_file, "3", bad, "3", "n", "4")

    assert "Número de tarefa inválido." in capsys.readouterr().out
    assert script.prompts.count("Digite o número da tarefa concluída: ") == 2
    assert [t.text for t in store.list()] == ["a", "b"]


def test_complete_with_empty_list_returns_to_menu(store, tasks_file, capsys):
    script = run_menu(store, tasks_file, "3", "4")

    assert "Nenhuma tarefa para completar." in capsys.readouterr().out
    assert "Digite o número da tarefa concluída: " not in script.prompts


def test_end_of_input_exits_and_saves(store, tasks_file, capsys):
    run_menu(store, tasks_file, "1", "unsaved?")

    assert "Saindo..." in capsys.readouterr().out
    assert json.loads(tasks_file.read_text()) == [{"id": 1, "text": "unsaved?"}]


def test_keyboard_interrupt_exits_and_saves(store, tasks_file):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    store.add("a")
    InteractiveMenu(store, tasks_file, read_line=interrupted).run()
    assert json.loads(tasks_file.read_text()) == [{"id": 1, "text": "a"}]


def test_complete_accepts_explicit_sign(store, tasks_file):
    for name in ("a", "b"):
        store.add(name)
    run_menu(store, tasks_file, "3", "+2", "n", "4")
    assert store.list() == [Task(id=1, text="a")]
