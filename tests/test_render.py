"""Tests for CLI rendering utilities."""
from salvager.domain.state import PlayerState
from salvager.presentation.cli.render import debug_enabled, format_status, render_menu
from salvager.services.status_service import build_status_view


def test_summary_status_is_single_line() -> None:
    view = build_status_view(PlayerState(name="Ripley", hp=80, credits=30, score=25), detailed=False)
    assert format_status(view) == ["Ripley | HP: 80 | Credits: 30 | Score: 25"]


def test_detailed_status_lists_location_and_inventory() -> None:
    state = PlayerState(name="Ripley", inventory=["Fuel Cell", "Nano-kit"], location=3)
    lines = format_status(build_status_view(state, detailed=True))

    assert lines == [
        "Ripley | HP: 100 | Credits: 50 | Score: 0",
        "Location: Asteroid Belt",
        "Inventory (2): Fuel Cell, Nano-kit",
    ]


def test_detailed_status_marks_empty_inventory() -> None:
    lines = format_status(build_status_view(PlayerState(), detailed=True))
    assert lines[-1] == "Inventory (0): (empty)"


def test_status_view_is_a_snapshot() -> None:
    state = PlayerState(inventory=["Scrap Metal"])
    view = build_status_view(state, detailed=True)
    state.inventory.append("Fuel Cell")
    assert view.inventory == ("Scrap Metal",)
    assert view.detailed


def test_render_menu_numbers_options(capsys) -> None:
    render_menu("Main Menu", ["Explore", "Status"])
    out = capsys.readouterr().out
    assert "=== Main Menu ===" in out
    assert "1. Explore" in out
    assert "2. Status" in out


def test_debug_enabled_requires_explicit_flag(monkeypatch) -> None:
    monkeypatch.delenv("SALVAGER_DEBUG", raising=False)
    assert debug_enabled() is False
    monkeypatch.setenv("SALVAGER_DEBUG", "true")
    assert debug_enabled() is False
    monkeypatch.setenv("SALVAGER_DEBUG", "1")
    assert debug_enabled() is True
