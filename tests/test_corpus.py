import random

import chordwalk.corpus
import chordwalk.models

import conftest


def test_generate_and_modulate (catalog, pop_corpus) -> None:

	"""The facade should wire the index, graphs and rng through to each operation."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, pop_corpus, rng=random.Random(2))

	assert len(corpus.generate(6)) == 6
	assert corpus.modulate("C", "Am", 4) == [["I", "IV", "V", "vi"]]


def test_empty_corpus (catalog) -> None:

	"""An empty corpus should give empty results, never errors."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, [], rng=random.Random(2))

	assert corpus.generate(4) == []
	assert corpus.transition_map() == {}
	assert corpus.pair_frequencies() == {}
	assert corpus.first_chord_frequencies() == {}
	assert corpus.modulate("I", "vi", 4) == []


def test_transition_map_and_counts (catalog) -> None:

	"""Aliases should be merged before counting."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, [
		conftest.make_progression(["C", "G7", "C"]),
		conftest.make_progression(["I", "V7"], type_tag="Loop"),
	])

	assert sorted(corpus.transition_map()["V7"]) == ["I", "I"]
	assert corpus.pair_counts()[chordwalk.models.ChordPair("I", "V7")] == 2
	assert corpus.first_chord_frequencies() == {"I": 1.0}


def test_catalog_growth_takes_effect (catalog) -> None:

	"""Registering a chord should change resolution on the next request."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, [conftest.make_progression(["C", "Bb", "F"])])

	assert corpus.unknown_labels() == ["Bb"]

	corpus.chords.append(chordwalk.models.Chord("bVII", "Bb", ["Bb", "D", "F"]))

	assert corpus.unknown_labels() == []
	assert corpus.pair_counts()[chordwalk.models.ChordPair("I", "bVII")] == 1


def test_filtered_shares_rng_and_settings (catalog) -> None:

	"""A filtered corpus should keep the catalog, rng and settings."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, [
		conftest.make_progression(["I", "V"], genres=["Jazz"]),
		conftest.make_progression(["vi", "IV"], genres=["Pop"]),
	])
	jazz = corpus.filtered(genres=["jazz"])

	assert len(jazz.progressions) == 1
	assert jazz.rng is corpus.rng
	assert jazz.settings is corpus.settings
	assert jazz.chords == corpus.chords


def test_similar (catalog) -> None:

	"""Similar chords should be looked up in the catalog."""

	corpus = chordwalk.corpus.ChordCorpus(catalog, [])

	assert corpus.similar("G") == ["V", "V7"]
