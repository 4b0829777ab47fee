"""Tests for navigator orchestration: filters, side panes, promotion, search.

Also drives random intent sequences to check the selection and single
active-pane invariants.
"""

from __future__ import annotations

import random
import unittest

from pacnav.navigator import (
    CENTER_PANE,
    DEPENDANTS_PANE,
    DEPENDENCIES_PANE,
    AppendSearchChar,
    BackspaceSearch,
    BeginSearchEntry,
    CancelSearchEntry,
    ChangeActivePane,
    CommitSearch,
    FilterMode,
    IntentOutcome,
    JumpEnd,
    JumpStart,
    MoveSelection,
    Navigator,
    PromoteToCenter,
    Quit,
    RepeatSearch,
    SearchDirection,
    SortMode,
    ToggleFilter,
    ToggleHelp,
    ToggleSort,
)
from pacnav.package_model import InstallReason, OptionalDependency, PackageIndex, PackageRecord


def _pkg(
    name: str,
    deps: tuple[str, ...] = (),
    reason: InstallReason = InstallReason.EXPLICIT,
    size: int | None = None,
    optional: tuple[str, ...] = (),
) -> PackageRecord:
    return PackageRecord(
        name=name,
        version="1.0",
        description=f"{name} package",
        url=f"https://example.org/{name}",
        install_reason=reason,
        size=size,
        dependencies=deps,
        optional_dependencies=tuple(OptionalDependency(dep) for dep in optional),
    )


def _names(records) -> list[str]:
    return [record.name for record in records]


def _scenario_navigator() -> Navigator:
    return Navigator(
        PackageIndex(
            [
                _pkg("A"),
                _pkg("B", deps=("A",)),
                _pkg("C", deps=("A", "B"), reason=InstallReason.DEPENDENCY),
            ]
        )
    )


def _flat_navigator(names: list[str]) -> Navigator:
    return Navigator(PackageIndex([_pkg(name) for name in names]))


class NavigatorConstructionTests(unittest.TestCase):
    def test_default_view_shows_only_explicit_packages(self) -> None:
        nav = _scenario_navigator()

        self.assertIs(nav.filter_mode, FilterMode.EXPLICIT_ONLY)
        self.assertEqual(_names(nav.center.items), ["A", "B"])
        self.assertEqual(nav.center.title, "Explicit")
        self.assertEqual(nav.active_pane, CENTER_PANE)
        self.assertTrue(nav.center.is_active)

    def test_dependants_pane_is_not_filtered(self) -> None:
        nav = _scenario_navigator()

        self.assertEqual(nav.center.selected().name, "A")
        self.assertEqual(_names(nav.dependants.items), ["B", "C"])
        self.assertEqual(nav.dependants.selection, 0)
        self.assertEqual(nav.dependencies.items, ())
        self.assertIsNone(nav.dependencies.selection)

    def test_empty_index_leaves_every_pane_empty(self) -> None:
        nav = Navigator(PackageIndex([]))

        for pane in nav.panes:
            self.assertEqual(pane.items, ())
            self.assertIsNone(pane.selection)
        self.assertIs(nav.apply(MoveSelection(1)), IntentOutcome.UNCHANGED)
        self.assertIs(nav.apply(ToggleFilter()), IntentOutcome.CHANGED)
        self.assertEqual(nav.center.items, ())

    def test_center_with_only_dependency_packages_is_empty_by_default(self) -> None:
        nav = Navigator(PackageIndex([_pkg("lib", reason=InstallReason.DEPENDENCY)]))

        self.assertEqual(nav.center.items, ())
        self.assertEqual(nav.dependants.items, ())
        self.assertEqual(nav.dependencies.items, ())


class NavigatorSelectionTests(unittest.TestCase):
    def test_moving_center_selection_recomputes_side_panes(self) -> None:
        nav = _scenario_navigator()

        outcome = nav.apply(MoveSelection(1))

        self.assertIs(outcome, IntentOutcome.CHANGED)
        self.assertEqual(nav.center.selected().name, "B")
        self.assertEqual(_names(nav.dependants.items), ["C"])
        self.assertEqual(_names(nav.dependencies.items), ["A"])

    def test_clamped_move_reports_unchanged(self) -> None:
        nav = _scenario_navigator()
        self.assertIs(nav.apply(MoveSelection(-1)), IntentOutcome.UNCHANGED)
        self.assertIs(nav.apply(JumpStart()), IntentOutcome.UNCHANGED)

    def test_side_pane_moves_do_not_touch_other_panes(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))

        self.assertIs(nav.apply(JumpEnd()), IntentOutcome.CHANGED)

        self.assertEqual(nav.dependants.selected().name, "C")
        self.assertEqual(nav.center.selected().name, "A")

    def test_side_pane_selection_resets_when_center_changes(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))
        nav.apply(MoveSelection(1))
        nav.apply(ChangeActivePane(CENTER_PANE))

        nav.apply(MoveSelection(1))
        nav.apply(MoveSelection(-1))

        self.assertEqual(nav.dependants.selection, 0)

    def test_change_active_pane_keeps_exactly_one_active(self) -> None:
        nav = _scenario_navigator()

        self.assertIs(nav.apply(ChangeActivePane(DEPENDENCIES_PANE)), IntentOutcome.CHANGED)
        self.assertIs(nav.apply(ChangeActivePane(DEPENDENCIES_PANE)), IntentOutcome.UNCHANGED)
        self.assertEqual([pane.is_active for pane in nav.panes], [False, False, True])

        nav.apply(ChangeActivePane(DEPENDANTS_PANE))
        self.assertEqual(nav.active_pane, DEPENDANTS_PANE)
        self.assertEqual([pane.is_active for pane in nav.panes], [True, False, False])

    def test_out_of_range_pane_indexes_are_ignored(self) -> None:
        nav = _flat_navigator(["a", "b"])
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))
        selections = [pane.selection for pane in nav.panes]

        for intent in (
            ChangeActivePane(7),
            ChangeActivePane(-3),
            MoveSelection(1, pane=5),
            MoveSelection(1, pane=-1),
            JumpEnd(pane=3),
            ToggleSort(pane=9),
        ):
            with self.subTest(intent=intent):
                self.assertIs(nav.apply(intent), IntentOutcome.UNCHANGED)
                self.assertEqual(nav.active_pane, DEPENDANTS_PANE)
                self.assertEqual([pane.is_active for pane in nav.panes], [True, False, False])
                self.assertEqual([pane.selection for pane in nav.panes], selections)
                self.assertEqual([pane.sort_mode for pane in nav.panes], [SortMode.NAME_ASCENDING] * 3)


class NavigatorSortTests(unittest.TestCase):
    def test_sort_toggle_is_per_pane_and_keeps_selection(self) -> None:
        nav = Navigator(
            PackageIndex(
                [
                    _pkg("a", size=1),
                    _pkg("b", size=30),
                    _pkg("c", size=20),
                    _pkg("d", deps=("a", "b", "c"), size=None),
                ]
            )
        )
        nav.apply(JumpEnd())
        selected = nav.center.selected()

        nav.apply(ToggleSort())

        self.assertIs(nav.center.sort_mode, SortMode.SIZE_DESCENDING)
        self.assertIs(nav.dependencies.sort_mode, SortMode.NAME_ASCENDING)
        self.assertEqual(_names(nav.center.items), ["b", "c", "a", "d"])
        self.assertIs(nav.center.selected(), selected)
        self.assertEqual(_names(nav.dependencies.items), ["a", "b", "c"])

    def test_side_pane_sort_mode_applies_to_recomputed_content(self) -> None:
        nav = Navigator(
            PackageIndex(
                [
                    _pkg("a", size=1),
                    _pkg("b", size=30),
                    _pkg("c", size=20),
                    _pkg("d", deps=("a", "b", "c")),
                ]
            )
        )
        nav.apply(ToggleSort(DEPENDENCIES_PANE))
        nav.apply(JumpEnd())

        sizes = [record.sort_size for record in nav.dependencies.items]
        self.assertEqual(sizes, sorted(sizes, reverse=True))
        self.assertEqual(nav.dependencies.selection, 0)


class NavigatorFilterTests(unittest.TestCase):
    def test_toggle_filter_twice_restores_center_items(self) -> None:
        nav = _scenario_navigator()
        before = nav.center.items

        nav.apply(ToggleFilter())
        self.assertIs(nav.filter_mode, FilterMode.ALL)
        self.assertEqual(_names(nav.center.items), ["A", "B", "C"])
        self.assertEqual(nav.center.title, "All")

        nav.apply(ToggleFilter())
        self.assertEqual(nav.center.items, before)

    def test_toggle_filter_keeps_selection_when_it_passes(self) -> None:
        nav = _scenario_navigator()
        nav.apply(MoveSelection(1))

        nav.apply(ToggleFilter())

        self.assertEqual(nav.center.selected().name, "B")

    def test_toggle_filter_falls_back_to_first_row(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ToggleFilter())
        nav.apply(JumpEnd())
        self.assertEqual(nav.center.selected().name, "C")

        nav.apply(ToggleFilter())

        self.assertEqual(nav.center.selection, 0)
        self.assertEqual(nav.center.selected().name, "A")
        self.assertEqual(_names(nav.dependants.items), ["B", "C"])

    def test_filter_rebuild_respects_center_sort_mode(self) -> None:
        nav = Navigator(
            PackageIndex(
                [
                    _pkg("a", size=1),
                    _pkg("b", size=5, reason=InstallReason.DEPENDENCY),
                    _pkg("c", size=3),
                ]
            )
        )
        nav.apply(ToggleSort())

        nav.apply(ToggleFilter())

        self.assertEqual(_names(nav.center.items), ["b", "c", "a"])


class NavigatorPromoteTests(unittest.TestCase):
    def test_promote_is_noop_from_center(self) -> None:
        nav = _scenario_navigator()
        self.assertIs(nav.apply(PromoteToCenter()), IntentOutcome.UNCHANGED)

    def test_promote_is_noop_from_empty_side_pane(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ChangeActivePane(DEPENDENCIES_PANE))
        self.assertIs(nav.apply(PromoteToCenter()), IntentOutcome.UNCHANGED)

    def test_promote_dependency_package_forces_all_filter(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))
        nav.apply(MoveSelection(1))
        self.assertEqual(nav.dependants.selected().name, "C")

        outcome = nav.apply(PromoteToCenter())

        self.assertIs(outcome, IntentOutcome.CHANGED)
        self.assertIs(nav.filter_mode, FilterMode.ALL)
        self.assertEqual(nav.center.selected().name, "C")
        self.assertEqual(nav.dependants.items, ())
        self.assertEqual(_names(nav.dependencies.items), ["A", "B"])
        self.assertEqual(nav.active_pane, DEPENDANTS_PANE)

    def test_promote_explicit_package_keeps_filter(self) -> None:
        nav = _scenario_navigator()
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))

        nav.apply(PromoteToCenter())

        self.assertIs(nav.filter_mode, FilterMode.EXPLICIT_ONLY)
        self.assertEqual(nav.center.selected().name, "B")
        self.assertEqual(_names(nav.dependencies.items), ["A"])

    def test_dependant_and_dependency_panes_are_consistent(self) -> None:
        records = [
            _pkg("glibc"),
            _pkg("zlib", deps=("glibc",), reason=InstallReason.DEPENDENCY),
            _pkg("python", deps=("glibc", "zlib"), optional=("tk",)),
            _pkg("tk", deps=("glibc",), reason=InstallReason.DEPENDENCY),
        ]
        nav = Navigator(PackageIndex(records), initial_filter=FilterMode.ALL)
        for record in records:
            nav.center.reanchor(record)
            nav.update_side_panes()
            dependencies = set(_names(nav.dependencies.items))
            for dependency in dependencies:
                self.assertIn(record.name, nav.index.dependants_of(dependency))
            for dependant in _names(nav.dependants.items):
                self.assertIn(record.name, set(nav.index[dependant].all_dependency_names()))


class NavigatorSearchTests(unittest.TestCase):
    def _search_for(self, nav: Navigator, term: str) -> None:
        nav.apply(BeginSearchEntry())
        for char in term:
            nav.apply(AppendSearchChar(char))

    def test_search_wraps_around_to_the_start(self) -> None:
        for term, expected in (("a", "a"), ("b", "b")):
            nav = _flat_navigator(["a", "b", "c"])
            nav.apply(JumpEnd())
            self._search_for(nav, term)

            outcome = nav.apply(CommitSearch())

            self.assertIs(outcome, IntentOutcome.CHANGED)
            self.assertEqual(nav.center.selected().name, expected)

    def test_search_never_matches_the_current_selection(self) -> None:
        nav = _flat_navigator(["a", "b", "c"])
        nav.apply(JumpEnd())
        self._search_for(nav, "c")

        outcome = nav.apply(CommitSearch())

        self.assertIs(outcome, IntentOutcome.NO_MATCH)
        self.assertEqual(nav.center.selected().name, "c")
        self.assertIn("no match", nav.status_message)
        self.assertFalse(nav.is_search_entry_mode)

    def test_backward_search_scans_upwards_with_wrap(self) -> None:
        nav = _flat_navigator(["lib-a", "app", "lib-b", "tool"])
        nav.apply(MoveSelection(1))
        self._search_for(nav, "lib")
        nav.apply(CommitSearch())
        self.assertEqual(nav.center.selected().name, "lib-b")

        nav.apply(RepeatSearch(SearchDirection.BACKWARD))
        self.assertEqual(nav.center.selected().name, "lib-a")

        nav.apply(RepeatSearch(SearchDirection.BACKWARD))
        self.assertEqual(nav.center.selected().name, "lib-b")

    def test_search_match_recomputes_side_panes(self) -> None:
        nav = _scenario_navigator()
        self._search_for(nav, "B")
        nav.apply(CommitSearch())

        self.assertEqual(nav.center.selected().name, "B")
        self.assertEqual(_names(nav.dependencies.items), ["A"])

    def test_repeat_search_activates_center_pane(self) -> None:
        nav = _flat_navigator(["a", "b"])
        self._search_for(nav, "b")
        nav.apply(CommitSearch())
        nav.apply(ChangeActivePane(DEPENDANTS_PANE))

        nav.apply(RepeatSearch(SearchDirection.FORWARD))

        self.assertEqual(nav.active_pane, CENTER_PANE)

    def test_empty_term_is_noop(self) -> None:
        nav = _flat_navigator(["a", "b"])
        self.assertIs(nav.apply(RepeatSearch(SearchDirection.FORWARD)), IntentOutcome.UNCHANGED)
        self.assertEqual(nav.center.selection, 0)

    def test_search_entry_edits_and_cancel(self) -> None:
        nav = _flat_navigator(["a", "b"])
        self._search_for(nav, "xy")
        self.assertTrue(nav.is_search_entry_mode)
        self.assertEqual(nav.search_term, "xy")

        nav.apply(BackspaceSearch())
        self.assertEqual(nav.search_term, "x")

        nav.apply(CancelSearchEntry())
        self.assertFalse(nav.is_search_entry_mode)
        self.assertEqual(nav.search_term, "")

    def test_navigation_intents_are_suppressed_during_search_entry(self) -> None:
        nav = _flat_navigator(["a", "b"])
        nav.apply(BeginSearchEntry())

        self.assertIs(nav.apply(MoveSelection(1)), IntentOutcome.UNCHANGED)
        self.assertIs(nav.apply(ToggleFilter()), IntentOutcome.UNCHANGED)
        self.assertEqual(nav.center.selection, 0)
        self.assertIs(nav.apply(Quit()), IntentOutcome.QUIT)

    def test_search_state_appears_in_snapshot(self) -> None:
        nav = _flat_navigator(["a", "b"])
        self._search_for(nav, "b")

        snapshot = nav.snapshot()

        self.assertTrue(snapshot.is_search_entry_mode)
        self.assertEqual(snapshot.search_term, "b")
        self.assertEqual(snapshot.panes[CENTER_PANE].counter_label, "1/2")
        self.assertEqual(snapshot.total_packages, 2)


class NavigatorInvariantTests(unittest.TestCase):
    def test_random_intent_sequences_keep_invariants(self) -> None:
        records = [
            _pkg("base"),
            _pkg("glibc", reason=InstallReason.DEPENDENCY, size=40),
            _pkg("bash", deps=("glibc", "readline"), size=9),
            _pkg("readline", deps=("glibc",), reason=InstallReason.DEPENDENCY, size=2),
            _pkg("python", deps=("glibc", "zlib"), optional=("tk", "absent")),
            _pkg("zlib", deps=("glibc",), reason=InstallReason.DEPENDENCY),
            _pkg("tk", deps=("glibc",), reason=InstallReason.DEPENDENCY, size=12),
        ]
        intents = [
            lambda rng: MoveSelection(rng.randint(-12, 12)),
            lambda rng: JumpStart(),
            lambda rng: JumpEnd(),
            lambda rng: ChangeActivePane(rng.randint(-1, 3)),
            lambda rng: ToggleSort(),
            lambda rng: ToggleFilter(),
            lambda rng: PromoteToCenter(),
            lambda rng: BeginSearchEntry(),
            lambda rng: AppendSearchChar(rng.choice("abglz")),
            lambda rng: CommitSearch(),
            lambda rng: CancelSearchEntry(),
            lambda rng: RepeatSearch(rng.choice(list(SearchDirection))),
            lambda rng: ToggleHelp(),
        ]
        rng = random.Random(1234)
        nav = Navigator(PackageIndex(records))
        for _step in range(2000):
            nav.apply(rng.choice(intents)(rng))
            for pane in nav.panes:
                if pane.items:
                    self.assertIsNotNone(pane.selection)
                    self.assertTrue(0 <= pane.selection < len(pane.items))
                else:
                    self.assertIsNone(pane.selection)
            self.assertEqual(sum(pane.is_active for pane in nav.panes), 1)
            self.assertTrue(nav.panes[nav.active_pane].is_active)
            selected = nav.center.selected()
            if selected is None:
                self.assertEqual(nav.dependants.items, ())
            else:
                self.assertEqual(set(_names(nav.dependants.items)), set(nav.index.dependants_of(selected.name)))


if __name__ == "__main__":
    unittest.main()
