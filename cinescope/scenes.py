"""
Scene definitions and the adapter from pure results to render instructions.
Nothing here draws; it only decides what the renderer receives.
"""

from dataclasses import dataclass  # static scene metadata
from typing import Dict, Optional, Tuple  # type hints

from .annotations import critics_annotation, genre_annotation, timeline_annotation
from .dataset import Dataset
from .models import (
	ALL_GENRES,
	CRITICS_SCENE,
	GENRE_SCENE,
	TIMELINE_SCENE,
	Annotation,
	Emphasis,
	Mark,
	Movie,
	RenderInstructions,
	SceneState,
)
from .scene_filters import MIN_BOX_OFFICE, FilteredView


RATING_DOMAIN = (6.5, 9.5)  # Scenes 1 and 2 vertical axis
META_SCORE_DOMAIN = (20, 100)  # Scene 3 vertical axis

BASE_EMPHASIS = Emphasis(opacity=0.7, stroke_width=1.5)  # Scene 3 marks
DECADE_FOCUS = Emphasis(opacity=1.0, stroke_width=3.0)
DECADE_BACKGROUND = Emphasis(opacity=0.3, stroke_width=1.5)
GENRE_FOCUS = Emphasis(opacity=0.8, stroke_width=2.0)
GENRE_BACKGROUND = Emphasis(opacity=0.2, stroke_width=1.0)


@dataclass(frozen=True)
class SceneDefinition:
	"""Static text of a scene."""
	title: str
	description: str
	x_label: str
	y_label: str


SCENE_DEFINITIONS: Dict[int, SceneDefinition] = {
	TIMELINE_SCENE: SceneDefinition(
		title='Timeline of Excellence',
		description='Explore how movie ratings and popularity have evolved over the decades',
		x_label='Year',
		y_label='IMDB Rating',
	),
	GENRE_SCENE: SceneDefinition(
		title='Genre Evolution',
		description='Discover how different movie genres have dominated different eras',
		x_label='Year',
		y_label='IMDB Rating',
	),
	CRITICS_SCENE: SceneDefinition(
		title='Critics vs Box Office',
		description='Examine the relationship between critical acclaim and commercial success',
		x_label='Box Office Gross (Major Releases $50M+)',
		y_label='Metacritic Score',
	),
}


# ---------- Emphasis ----------


def decade_emphasis(movie: Movie, decade: int) -> Emphasis:
	"""Highlight movies released within the selected decade."""
	return DECADE_FOCUS if decade <= movie.year <= decade + 9 else DECADE_BACKGROUND


def genre_emphasis(movie: Movie, genre: str) -> Emphasis:
	"""Highlight movies of the selected genre; "all" highlights everything."""
	return GENRE_FOCUS if genre == ALL_GENRES or movie.genre == genre else GENRE_BACKGROUND


def emphasis_for(view: FilteredView, state: SceneState) -> Tuple[Emphasis, ...]:
	"""Per-mark emphasis for a view under the given control state, in view order."""
	if view.scene == TIMELINE_SCENE:
		return tuple(decade_emphasis(m, state.selected_decade) for m in view.movies)
	if view.scene == GENRE_SCENE:
		return tuple(genre_emphasis(m, state.selected_genre) for m in view.movies)
	return tuple(BASE_EMPHASIS for _ in view.movies)


# ---------- Render instructions ----------


def build_instructions(
	dataset: Dataset,
	view: FilteredView,
	state: SceneState,
	gross_anchor: Optional[Tuple[float, float]] = None,
) -> RenderInstructions:
	"""
	Translate a filtered view into a full frame for its scene.
	gross_anchor is the cached Scene 3 gross extent and is ignored by other scenes.
	"""
	definition = SCENE_DEFINITIONS[view.scene]
	emphasis = emphasis_for(view, state)
	annotation: Optional[Annotation]

	if view.scene == CRITICS_SCENE:
		# Upper bound falls back to the threshold itself when nothing qualifies at all
		x_domain = (float(MIN_BOX_OFFICE), float(gross_anchor[1]) if gross_anchor else float(MIN_BOX_OFFICE))
		y_domain = (float(META_SCORE_DOMAIN[0]), float(META_SCORE_DOMAIN[1]))
		marks = tuple(
			Mark(movie=m, x=m.gross, y=m.meta_score, size=m.votes, color=m.genre, emphasis=e)
			for m, e in zip(view.movies, emphasis)
		)
		annotation = critics_annotation(view)
	else:
		x_domain = (float(dataset.year_extent[0]), float(dataset.year_extent[1]))
		y_domain = RATING_DOMAIN
		marks = tuple(
			Mark(movie=m, x=m.year, y=m.rating, size=m.votes, color=m.genre, emphasis=e)
			for m, e in zip(view.movies, emphasis)
		)
		annotation = timeline_annotation(dataset) if view.scene == TIMELINE_SCENE else genre_annotation(dataset)

	return RenderInstructions(
		scene=view.scene,
		title=definition.title,
		description=definition.description,
		x_label=definition.x_label,
		y_label=definition.y_label,
		x_domain=x_domain,
		y_domain=y_domain,
		size_domain=dataset.votes_extent,
		color_domain=dataset.genres,
		marks=marks,
		annotation=annotation,
	)


# ---------- Text formatting used by renderers ----------


def format_gross(value: float) -> str:
	"""Axis tick text for box office values: $850M, $1.2B."""
	millions = value / 1_000_000
	if millions >= 1000:
		return f"${millions / 1000:.1f}B"
	return f"${millions:.0f}M"


def tooltip_text(movie: Movie) -> str:
	"""Plain-text tooltip for a mark."""
	lines = [
		f"{movie.title} ({movie.year})",
		f"Rating: {movie.rating}/10",
		f"Genre: {movie.genre}",
		f"Director: {movie.director}",
		f"Votes: {movie.votes:,}",
	]
	if movie.gross is not None:
		lines.append(f"Gross: ${movie.gross:,.0f}")
	if movie.meta_score is not None:
		lines.append(f"Metacritic: {movie.meta_score}/100")
	if movie.overview:
		lines.append(f"{movie.overview[:100]}...")
	return '\n'.join(lines)
