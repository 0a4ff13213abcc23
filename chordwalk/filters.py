"""Selecting corpus progressions by their metadata."""

import typing

import chordwalk.models


def _same_text (value: typing.Optional[str], wanted: str) -> bool:

	"""Case-insensitive equality that treats a missing value as no match."""

	return value is not None and value.casefold() == wanted.casefold()


def filter_progressions (
	progressions: typing.Iterable[chordwalk.models.Progression],
	genres: typing.Optional[typing.Sequence[str]] = None,
	period: typing.Optional[str] = None,
	composer: typing.Optional[str] = None,
	artist: typing.Optional[str] = None,
	progression_type: typing.Optional[str] = None,
	year_after: typing.Optional[int] = None,
	year_before: typing.Optional[int] = None
) -> typing.List[chordwalk.models.Progression]:

	"""Return the progressions matching every given criterion.

	Parameters:
		progressions: The corpus to filter.
		genres: Keep progressions tagged with any of these genres.
		period: Keep progressions from this period.
		composer: Keep progressions by this composer.
		artist: Keep progressions by this artist.
		progression_type: Keep progressions with this raw type tag.
		year_after: Keep progressions from this year or later.
		year_before: Keep progressions from this year or earlier.

	Text criteria compare case-insensitively. Criteria left as None or empty
	do not filter. A progression without a year fails any year bound.

	Example:
		```python
		filter_progressions(corpus, genres=["jazz"], year_after=1950)
		```
	"""

	selected: typing.List[chordwalk.models.Progression] = []

	for progression in progressions:

		if genres and not any(_same_text(genre, wanted) for genre in progression.genres for wanted in genres):
			continue

		if period and not _same_text(progression.period, period):
			continue

		if composer and not _same_text(progression.composer, composer):
			continue

		if artist and not _same_text(progression.artist, artist):
			continue

		if progression_type and not _same_text(progression.type_tag, progression_type):
			continue

		if year_after is not None and (progression.year is None or progression.year < year_after):
			continue

		if year_before is not None and (progression.year is None or progression.year > year_before):
			continue

		selected.append(progression)

	return selected
