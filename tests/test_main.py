import json

import chordwalk.__main__
import chordwalk.loader

import conftest


def _write_data (tmp_path, catalog) -> list:

	"""Write a catalog and corpus to disk and return the path arguments."""

	chords_path = tmp_path / "chords.json"
	progressions_path = tmp_path / "progressions.json"

	chordwalk.loader.save_chords(str(chords_path), catalog)
	chordwalk.loader.save_progressions(str(progressions_path), [
		conftest.make_progression(["I", "IV", "V", "vi"]),
	])

	return [
		"--config", str(tmp_path / "missing.yaml"),
		"--chords", str(chords_path),
		"--progressions", str(progressions_path),
		"--seed", "3",
	]


def test_load_config (tmp_path) -> None:

	"""YAML config should load, and a missing file should give defaults."""

	path = tmp_path / "config.yaml"
	path.write_text("modulation:\n  attempts: 4\n  max_rounds: 2\n")

	config = chordwalk.__main__.load_config(str(path))
	settings = chordwalk.__main__.settings_from_config(config)

	assert (settings.attempts, settings.max_rounds, settings.similarity_threshold) == (4, 2, 0.8)
	assert chordwalk.__main__.load_config(str(tmp_path / "nope.yaml")) == {}


def test_generate_command (tmp_path, catalog, capsys) -> None:

	"""The generate command should print a progression of the requested length."""

	chordwalk.__main__.main(_write_data(tmp_path, catalog) + ["generate", "--length", "5"])

	output = capsys.readouterr().out.strip()

	assert len(output.split(" - ")) == 5


def test_modulate_command (tmp_path, catalog, capsys) -> None:

	"""The modulate command should print each path found."""

	chordwalk.__main__.main(_write_data(tmp_path, catalog) + ["modulate", "C", "Am"])

	assert capsys.readouterr().out.strip() == "I - IV - V - vi"


def test_pairs_command (tmp_path, catalog, capsys) -> None:

	"""The pairs command should list every counted pair."""

	chordwalk.__main__.main(_write_data(tmp_path, catalog) + ["pairs"])

	lines = capsys.readouterr().out.strip().splitlines()

	assert "I -> IV : 1 times" in lines
	assert len(lines) == 3


def test_config_file_supplies_data_paths (tmp_path, catalog, capsys) -> None:

	"""Data paths and seed should be read from the config when not given."""

	arguments = _write_data(tmp_path, catalog)
	config_path = tmp_path / "config.yaml"
	config_path.write_text(json.dumps({
		"data": {"chords": arguments[3], "progressions": arguments[5]},
		"generation": {"seed": 1, "length": 3},
	}))

	chordwalk.__main__.main(["--config", str(config_path), "firsts"])

	assert capsys.readouterr().out.strip() == "I: 100.0%"
