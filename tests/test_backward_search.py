import random

import chordwalk.backward_search
import chordwalk.canonical
import chordwalk.transition_graph

import conftest


def test_target_without_predecessors (catalog, pop_corpus, rng) -> None:

	"""A target nothing leads to should give a one-chord path, not an error."""

	index = chordwalk.canonical.build_index(catalog)
	_, backward = chordwalk.transition_graph.build_graphs(pop_corpus, index)

	assert chordwalk.backward_search.build_backward_path("I", 4, backward, rng) == ["I"]


def test_path_is_oldest_first (catalog, pop_corpus, rng) -> None:

	"""The walk should prepend predecessors so the target comes last."""

	index = chordwalk.canonical.build_index(catalog)
	_, backward = chordwalk.transition_graph.build_graphs(pop_corpus, index)

	assert chordwalk.backward_search.build_backward_path("vi", 4, backward, rng) == ["I", "IV", "V", "vi"]


def test_stops_early_when_predecessors_run_out (catalog, pop_corpus, rng) -> None:

	"""Asking for more chords than the corpus supports should return the partial path."""

	index = chordwalk.canonical.build_index(catalog)
	_, backward = chordwalk.transition_graph.build_graphs(pop_corpus, index)

	assert chordwalk.backward_search.build_backward_path("vi", 10, backward, rng) == ["I", "IV", "V", "vi"]
	assert chordwalk.backward_search.build_backward_path("vi", 2, backward, rng) == ["V", "vi"]
	assert chordwalk.backward_search.build_backward_path("vi", 1, backward, rng) == ["vi"]


def test_avoids_self_repeat_when_possible (rng) -> None:

	"""A chord should only precede itself when nothing else can."""

	_, backward = chordwalk.transition_graph.build_graphs([
		conftest.make_progression(["IV", "V", "V", "V", "V", "I"]),
	], {})

	assert chordwalk.backward_search.build_backward_path("I", 4, backward, rng) == ["IV", "V", "I"]

	_, only_self = chordwalk.transition_graph.build_graphs([conftest.make_progression(["V", "V", "I"])], {})

	assert chordwalk.backward_search.build_backward_path("I", 3, only_self, rng) == ["V", "V", "I"]


def test_paths_end_on_target () -> None:

	"""Every path should end on the target and stay within the requested length."""

	_, backward = chordwalk.transition_graph.build_graphs([
		conftest.make_progression(["I", "vi", "IV", "V"], type_tag="Loop"),
		conftest.make_progression(["IV", "V", "I"]),
	], {})
	rng = random.Random(8)

	for _ in range(100):
		path = chordwalk.backward_search.build_backward_path("I", 5, backward, rng)

		assert path[-1] == "I"
		assert len(path) == 5

		for previous, current in zip(path, path[1:]):
			assert backward.count(current, previous) > 0
