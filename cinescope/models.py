"""
Data models for CineScope.
Defines the immutable records and the render/insight payloads exchanged between
the scene controller and its rendering collaborators.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Optional, Tuple  # optional values and fixed-size tuples


# Scene identifiers used across the controller, filters and API
TIMELINE_SCENE = 1  # Timeline of Excellence
GENRE_SCENE = 2  # Genre Evolution
CRITICS_SCENE = 3  # Critics vs Box Office
SCENES = (TIMELINE_SCENE, GENRE_SCENE, CRITICS_SCENE)

ALL_GENRES = 'all'  # genre selector value meaning "no genre emphasis"


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single top-rated film that survived validation.
	Instances are shared by reference between the dataset and every filtered view.
	"""
	title: str  # film title as it appears in the source
	year: int  # release year, always within [1920, 2020]
	rating: float  # IMDB rating on a 1-10 scale
	genre: str  # primary genre (first entry of the source genre list)
	director: str  # director's name
	votes: int  # number of IMDB votes
	runtime: int  # runtime in minutes
	overview: str = ''  # short synopsis
	meta_score: Optional[int] = None  # Metacritic score 0-100 when the source has one
	gross: Optional[float] = None  # box office gross in dollars when known
	stars: Tuple[str, ...] = ()  # up to four leading actors, billing order preserved


@dataclass(frozen=True)
class SceneState:
	"""
	Current position of every user control plus the active scene.
	Replaced wholesale (never patched) whenever a control event arrives.
	"""
	current_scene: int = TIMELINE_SCENE  # which of the three scenes is shown
	selected_decade: int = 2000  # decade start driving Scene 1 emphasis
	selected_genre: str = ALL_GENRES  # genre driving Scene 2 emphasis
	min_rating: float = 8.0  # rating threshold for Scene 3 membership


@dataclass(frozen=True)
class Emphasis:
	"""Presentation weight of a single mark."""
	opacity: float
	stroke_width: float


@dataclass(frozen=True)
class Mark:
	"""
	One visual mark handed to the renderer.
	x/y are in data units; the renderer owns the mapping to pixels.
	"""
	movie: Movie  # record behind the mark (reference, not a copy)
	x: float  # horizontal data value (year or gross)
	y: float  # vertical data value (rating or Metacritic score)
	size: int  # vote count, mapped to a radius by the renderer
	color: str  # genre, mapped to a color by the renderer
	emphasis: Emphasis  # current opacity and stroke width


@dataclass(frozen=True)
class Annotation:
	"""Callout attached to a single data point."""
	label: str  # body text of the callout
	title: str  # short heading of the callout
	anchor: Tuple[float, float]  # (x, y) in data units
	offset: Tuple[int, int]  # (dx, dy) in pixels relative to the anchor


@dataclass(frozen=True)
class Insight:
	"""Narrative text shown next to the chart."""
	title: str
	body: str


@dataclass(frozen=True)
class RenderInstructions:
	"""
	Everything a renderer needs to draw one scene from scratch.
	Produced on scene entry and on membership-changing control events.
	"""
	scene: int  # scene id
	title: str  # scene heading
	description: str  # scene sub-heading
	x_label: str  # horizontal axis label
	y_label: str  # vertical axis label
	x_domain: Tuple[float, float]  # horizontal scale domain
	y_domain: Tuple[float, float]  # vertical scale domain
	size_domain: Tuple[int, int]  # vote extent used for mark radius
	color_domain: Tuple[str, ...]  # genres in first-seen order
	marks: Tuple[Mark, ...]  # ordered marks
	annotation: Optional[Annotation] = None  # zero or one callout


@dataclass(frozen=True)
class EmphasisUpdate:
	"""
	Same-scene presentation change: one Emphasis per mark of the current frame,
	in mark order. Axes, domains and membership are untouched.
	"""
	scene: int
	emphasis: Tuple[Emphasis, ...]


@dataclass(frozen=True)
class ControlEvent:
	"""A discrete event emitted by the control surface."""
	name: str  # sceneSelected | decadeChanged | genreChanged | ratingChanged
	value: object  # scene number, decade start, genre name or rating threshold
