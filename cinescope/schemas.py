"""
Pydantic models describing scene snapshots on the wire.
Shared by the FastAPI server and the Streamlit client so both draw from the same shape.
"""

from typing import List, Optional, Tuple, Union  # precise typing for clarity

from pydantic import BaseModel  # response schema definitions

from .models import Annotation, Insight, Mark, RenderInstructions, SceneState
from .scenes import tooltip_text


# Shape of a single mark in responses
class MarkOut(BaseModel):
	title: str  # movie title
	year: int  # release year
	genre: str  # color key
	x: float  # horizontal data value
	y: float  # vertical data value
	size: int  # vote count
	opacity: float  # emphasis
	stroke_width: float  # emphasis
	tooltip: str  # hover text


class AnnotationOut(BaseModel):
	label: str
	title: str
	anchor: Tuple[float, float]  # data units
	offset: Tuple[int, int]  # pixels


class FrameOut(BaseModel):
	scene: int
	title: str
	description: str
	x_label: str
	y_label: str
	x_domain: Tuple[float, float]
	y_domain: Tuple[float, float]
	size_domain: Tuple[int, int]
	color_domain: List[str]
	marks: List[MarkOut]
	annotation: Optional[AnnotationOut] = None


class InsightOut(BaseModel):
	title: str
	body: str


class StateOut(BaseModel):
	current_scene: int
	selected_decade: int
	selected_genre: str
	min_rating: float


# Complete snapshot returned by GET /scene and POST /events
class SceneSnapshot(BaseModel):
	state: StateOut
	frame: Optional[FrameOut] = None
	insight: Optional[InsightOut] = None
	genres: List[str]  # options for the genre selector
	year_extent: Tuple[int, int]  # bounds for the decade slider


# Body of POST /events
class ControlEventIn(BaseModel):
	name: str  # sceneSelected | decadeChanged | genreChanged | ratingChanged
	value: Union[int, float, str]


def mark_out(mark: Mark) -> MarkOut:
	"""Convert a render mark into its wire form."""
	return MarkOut(
		title=mark.movie.title,
		year=mark.movie.year,
		genre=mark.color,
		x=mark.x,
		y=mark.y,
		size=mark.size,
		opacity=mark.emphasis.opacity,
		stroke_width=mark.emphasis.stroke_width,
		tooltip=tooltip_text(mark.movie),
	)


def annotation_out(annotation: Optional[Annotation]) -> Optional[AnnotationOut]:
	if annotation is None:
		return None
	return AnnotationOut(
		label=annotation.label,
		title=annotation.title,
		anchor=annotation.anchor,
		offset=annotation.offset,
	)


def frame_out(frame: RenderInstructions) -> FrameOut:
	"""Convert render instructions into their wire form."""
	return FrameOut(
		scene=frame.scene,
		title=frame.title,
		description=frame.description,
		x_label=frame.x_label,
		y_label=frame.y_label,
		x_domain=frame.x_domain,
		y_domain=frame.y_domain,
		size_domain=frame.size_domain,
		color_domain=list(frame.color_domain),
		marks=[mark_out(m) for m in frame.marks],
		annotation=annotation_out(frame.annotation),
	)


def build_snapshot(
	state: SceneState,
	frame: Optional[RenderInstructions],
	insight: Optional[Insight],
	genres: Tuple[str, ...],
	year_extent: Tuple[int, int],
) -> SceneSnapshot:
	"""Assemble the full snapshot for a client."""
	return SceneSnapshot(
		state=StateOut(
			current_scene=state.current_scene,
			selected_decade=state.selected_decade,
			selected_genre=state.selected_genre,
			min_rating=state.min_rating,
		),
		frame=frame_out(frame) if frame is not None else None,
		insight=InsightOut(title=insight.title, body=insight.body) if insight is not None else None,
		genres=list(genres),
		year_extent=year_extent,
	)
