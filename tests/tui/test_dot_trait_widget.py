"""
Tests for the dot-row Textual widget (vte_sheet/tui/widgets/dot_trait.py).

Clicks are simulated by posting Dot.Clicked from the dot itself, the same
message a mouse click produces.
"""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult

from vte_sheet.traits.dot_trait import DotTraitState
from vte_sheet.tui.widgets.dot_trait import Dot, DotTrait


class _TestApp(App):
    def __init__(self, trait: DotTrait) -> None:
        super().__init__()
        self.trait = trait
        self.changes: list[tuple[int, int]] = []

    def compose(self) -> ComposeResult:
        yield self.trait

    def on_dot_trait_changed(self, message: DotTrait.Changed) -> None:
        self.changes.append((message.trait_id, message.value))


def _strength(value: int = 1) -> DotTrait:
    return DotTrait(17, "Strength", DotTraitState(1, 5, value))


async def _click(pilot, trait: DotTrait, index: int) -> None:
    dot = list(trait.query(Dot))[index]
    dot.post_message(Dot.Clicked(dot.index))
    await pilot.pause()


@pytest.mark.asyncio
async def test_renders_one_dot_per_max() -> None:
    trait = _strength(2)
    app = _TestApp(trait)

    async with app.run_test():
        dots = list(trait.query(Dot))

        assert len(dots) == 5
        assert [d.filled for d in dots] == [True, True, False, False, False]
        assert dots[0].has_class("-locked")
        assert not dots[1].has_class("-locked")


@pytest.mark.asyncio
async def test_click_unfilled_fills_through() -> None:
    trait = _strength(1)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        await _click(pilot, trait, 3)

        assert trait.value == 4
        assert [d.filled for d in trait.query(Dot)] == [True, True, True, True, False]
        assert app.changes == [(17, 4)]


@pytest.mark.asyncio
async def test_click_interior_filled_truncates() -> None:
    trait = _strength(4)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        await _click(pilot, trait, 1)

        assert trait.value == 2
        assert app.changes == [(17, 2)]


@pytest.mark.asyncio
async def test_click_locked_dot_posts_nothing() -> None:
    trait = _strength(1)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        await _click(pilot, trait, 0)

        assert trait.value == 1
        assert app.changes == []


@pytest.mark.asyncio
async def test_plus_and_minus_keys() -> None:
    trait = _strength(2)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        trait.focus()
        await pilot.press("plus")
        await pilot.press("plus")
        await pilot.press("minus")
        await pilot.pause()

        assert trait.value == 3
        assert app.changes == [(17, 3), (17, 4), (17, 3)]


@pytest.mark.asyncio
async def test_plus_at_max_clamps() -> None:
    trait = _strength(5)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        trait.focus()
        await pilot.press("plus")
        await pilot.pause()

        assert trait.value == 5
        assert app.changes == []


@pytest.mark.asyncio
async def test_back_to_back_clicks_each_see_committed_value() -> None:
    """A second click queued before the first is handled acts on the new value."""
    trait = _strength(1)
    app = _TestApp(trait)

    async with app.run_test() as pilot:
        dot = list(trait.query(Dot))[3]
        dot.post_message(Dot.Clicked(dot.index))
        dot.post_message(Dot.Clicked(dot.index))
        await pilot.pause()

        assert trait.value == 3
        assert [d.filled for d in trait.query(Dot)] == [True, True, True, False, False]
        assert app.changes == [(17, 4), (17, 3)]
