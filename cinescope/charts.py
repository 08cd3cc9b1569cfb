"""
Altair chart builder for scene snapshots.
Turns a FrameOut payload into a layered scatter chart; this is the only module that
knows about drawing.
"""

from typing import List

import altair as alt

from .models import CRITICS_SCENE
from .schemas import FrameOut

SIZE_RANGE = [9, 144]  # squared radii 3..12 px, Altair sizes marks by area


def frame_records(frame: FrameOut) -> List[dict]:
	"""Marks as inline chart rows, one per movie."""
	return [m.model_dump() for m in frame.marks]


def _x_axis(frame: FrameOut) -> alt.Axis:
	if frame.scene == CRITICS_SCENE:
		# $50M / $1.2B ticks, same rule as scenes.format_gross
		label_expr = (
			"datum.value >= 1e9 ? '$' + format(datum.value / 1e9, '.1f') + 'B' "
			": '$' + format(datum.value / 1e6, '.0f') + 'M'"
		)
		return alt.Axis(title=frame.x_label, tickCount=8, labelExpr=label_expr, grid=True)
	return alt.Axis(title=frame.x_label, format='d', grid=True)


def build_scene_chart(frame: FrameOut, width: int = 740, height: int = 380) -> alt.LayerChart:
	"""Scatter of the frame's marks with its fixed domains and optional annotation."""
	data = alt.Data(values=frame_records(frame))
	points = (
		alt.Chart(data)
		.mark_circle(stroke='white')
		.encode(
			x=alt.X('x:Q', scale=alt.Scale(domain=list(frame.x_domain), nice=False), axis=_x_axis(frame)),
			y=alt.Y('y:Q', scale=alt.Scale(domain=list(frame.y_domain)), title=frame.y_label),
			size=alt.Size('size:Q', scale=alt.Scale(domain=list(frame.size_domain), range=SIZE_RANGE), legend=None),
			color=alt.Color('genre:N', scale=alt.Scale(domain=frame.color_domain, scheme='category10'), title='Genre'),
			opacity=alt.Opacity('opacity:Q', scale=None),
			strokeWidth=alt.StrokeWidth('stroke_width:Q', scale=None),
			tooltip=['title:N', 'year:Q', 'genre:N', 'tooltip:N'],
		)
	)

	layers = [points]
	if frame.annotation is not None:
		note = alt.Data(values=[{
			'x': frame.annotation.anchor[0],
			'y': frame.annotation.anchor[1],
			'text': f"{frame.annotation.title}: {frame.annotation.label}",
		}])
		dx, dy = frame.annotation.offset
		layers.append(alt.Chart(note).mark_point(shape='circle', size=200, filled=False, color='black').encode(x='x:Q', y='y:Q'))
		layers.append(alt.Chart(note).mark_text(dx=dx, dy=dy, fontWeight='bold', align='left').encode(x='x:Q', y='y:Q', text='text:N'))

	return alt.layer(*layers).properties(width=width, height=height, title=frame.title)
