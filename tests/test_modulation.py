import random

import pytest

import chordwalk.canonical
import chordwalk.modulation
import chordwalk.transition_graph

import conftest


def _planner (catalog, progressions, seed: int = 1, **settings) -> chordwalk.modulation.ModulationPlanner:

	"""Build a planner over a corpus with a seeded rng."""

	index = chordwalk.canonical.build_index(catalog)
	_, backward = chordwalk.transition_graph.build_graphs(progressions, index)

	return chordwalk.modulation.ModulationPlanner(
		backward,
		catalog,
		rng = random.Random(seed),
		settings = chordwalk.modulation.ModulationSettings(**settings)
	)


def test_finds_direct_path (catalog, pop_corpus) -> None:

	"""A corpus containing I-IV-V-vi should yield that path."""

	planner = _planner(catalog, pop_corpus)
	paths = planner.build_modulation("I", "vi", 4)

	assert paths == [["I", "IV", "V", "vi"]]


def test_direct_phase_does_not_check_length (catalog) -> None:

	"""Direct paths that start correctly are kept even when shorter than requested."""

	planner = _planner(catalog, [conftest.make_progression(["IV", "V", "vi"])])

	assert planner.build_modulation("IV", "vi", 6) == [["IV", "V", "vi"]]


def test_common_tone_fallback (catalog) -> None:

	"""When no direct walk starts on the start chord, a bridged path should be found."""

	progressions = [
		conftest.make_progression(["V", "vi"]),
		conftest.make_progression(["I", "V7"]),
	]
	planner = _planner(catalog, progressions)

	assert planner.build_modulation("I", "vi", 4) == [["I", "V7", "V", "vi"]]


def test_exhaustion_returns_empty (catalog, pop_corpus) -> None:

	"""An unreachable start should give an empty list, not an error."""

	planner = _planner(catalog, pop_corpus, attempts=3, max_rounds=2)

	assert planner.build_modulation("V", "I", 4) == []


def test_round_budget_is_respected (catalog, pop_corpus, monkeypatch) -> None:

	"""Each strategy should be tried once per round, for the configured number of rounds."""

	planner = _planner(catalog, pop_corpus, attempts=2, max_rounds=3)
	calls = {"direct": 0, "common": 0}

	original_direct = planner.direct_modulation_paths
	original_common = planner.common_tone_modulation_paths

	def counting_direct (target, length, attempts=None):
		calls["direct"] += 1
		return original_direct(target, length, attempts)

	def counting_common (target, length, attempts=None):
		calls["common"] += 1
		return original_common(target, length, attempts)

	monkeypatch.setattr(planner, "direct_modulation_paths", counting_direct)
	monkeypatch.setattr(planner, "common_tone_modulation_paths", counting_common)

	assert planner.build_modulation("V", "I", 4) == []
	assert calls == {"direct": 3, "common": 3}


def test_success_skips_second_phase (catalog, pop_corpus, monkeypatch) -> None:

	"""The common-tone strategy should not run once the direct one succeeds."""

	planner = _planner(catalog, pop_corpus)

	def fail (*args, **kwargs):
		raise AssertionError("common-tone search should not run")

	monkeypatch.setattr(planner, "common_tone_modulation_paths", fail)

	assert planner.build_modulation("I", "vi", 4)


def test_direct_paths_count_and_target (catalog, pop_corpus) -> None:

	"""Direct generation should return one path per attempt, each ending on the target."""

	planner = _planner(catalog, pop_corpus, attempts=7)
	paths = planner.direct_modulation_paths("vi", 3)

	assert len(paths) == 7
	assert all(path == ["IV", "V", "vi"] for path in paths)
	assert len(planner.direct_modulation_paths("vi", 3, attempts=2)) == 2


def test_common_tone_split (catalog) -> None:

	"""The second half should hold length // 2 chords and end on the target."""

	progressions = [
		conftest.make_progression(["I", "vi", "IV", "V"], type_tag="Loop"),
		conftest.make_progression(["ii", "V7", "I"], type_tag="Loop"),
	]
	planner = _planner(catalog, progressions, seed=6)

	for length in (2, 4, 5, 7):
		for path in planner.common_tone_modulation_paths("I", length):
			assert path[-1] == "I"
			assert len(path) <= length


def test_common_tone_single_chord_has_no_split (catalog, pop_corpus) -> None:

	"""A one-chord request leaves nothing for the second half, so no paths come back."""

	planner = _planner(catalog, pop_corpus)

	assert planner.common_tone_modulation_paths("vi", 1) == []


def test_zero_attempts_finds_nothing (catalog, pop_corpus) -> None:

	"""A zero budget should search nothing."""

	planner = _planner(catalog, pop_corpus, attempts=0)

	assert planner.build_modulation("I", "vi", 4) == []


def test_settings_validation () -> None:

	"""Negative budgets and out-of-range thresholds should be rejected."""

	with pytest.raises(ValueError):
		chordwalk.modulation.ModulationSettings(attempts=-1)

	with pytest.raises(ValueError):
		chordwalk.modulation.ModulationSettings(max_rounds=-1)

	with pytest.raises(ValueError):
		chordwalk.modulation.ModulationSettings(similarity_threshold=1.5)

	settings = chordwalk.modulation.ModulationSettings()

	assert (settings.attempts, settings.max_rounds, settings.similarity_threshold) == (10, 10, 0.8)
