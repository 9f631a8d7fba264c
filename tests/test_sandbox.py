import io

import pygame
import pytest

from valkyrion.application import Application, ApplicationError
from valkyrion.sandbox import (
    RigidBodyComponent,
    SandboxApp,
    TransformComponent,
    main,
    run_ecs_test,
)


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    try:
        Application.get().shutdown()
    except ApplicationError:
        pass
    pygame.display.quit()


def test_ecs_test_reports_success(capsys):
    out = io.StringIO()
    run_ecs_test(out)
    text = out.getvalue()
    assert text.startswith("\n=== Starting ECS Test ===\n")
    assert text.endswith("\n=== ECS Test Completed Successfully ===\n")
    assert "was properly recycled" in text
    assert "WARNING" not in capsys.readouterr().err


def test_ecs_test_prints_components():
    out = io.StringIO()
    run_ecs_test(out)
    text = out.getvalue()
    assert "Position: (1, 2, 3)" in text
    assert "Velocity: (10, 20)" in text


def test_ecs_test_keeps_first_entity_components():
    coordinator = run_ecs_test(io.StringIO())
    first = 0
    assert coordinator.get_component(first, TransformComponent) == TransformComponent(1.0, 2.0, 3.0)
    assert coordinator.get_component(first, RigidBodyComponent) == RigidBodyComponent(10.0, 20.0)


def test_ecs_test_destroys_stress_entities():
    coordinator = run_ecs_test(io.StringIO())
    assert coordinator.living_count < 1000
    assert coordinator.has_component(0, TransformComponent) is True


def test_sandbox_app_runs_ecs_test_on_start(capsys):
    app = SandboxApp()
    try:
        assert Application.get() is app
        assert app.window.title == "Valkyrion Sandbox"
        assert "ECS Test Completed Successfully" in capsys.readouterr().out
    finally:
        app.shutdown()


def test_main_runs_until_window_closes(monkeypatch, capsys):
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    assert main([]) == 0
    assert "ECS Test Completed Successfully" in capsys.readouterr().out
    with pytest.raises(ApplicationError):
        Application.get()


def test_main_reports_errors(capsys):
    Application("already running")
    assert main([]) == 1
    assert "Error: Application already exists!" in capsys.readouterr().err