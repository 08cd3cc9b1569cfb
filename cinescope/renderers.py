"""
Snapshot renderer.
A render collaborator that keeps the latest frame (with emphasis applied) and the
latest insight in memory, for surfaces that redraw from a snapshot (the API and
the Streamlit app).
"""

from dataclasses import replace  # frames are immutable
from typing import Optional  # type hints

from loguru import logger  # console logger

from .models import EmphasisUpdate, Insight, RenderInstructions


class SnapshotRenderer:
	"""
	Implements both SceneRenderer and InsightSurface.
	render() replaces the snapshot; update_emphasis() rewrites mark emphasis only.
	"""

	def __init__(self):
		self.frame: Optional[RenderInstructions] = None  # what a client should draw now
		self.insight: Optional[Insight] = None  # text shown next to the chart
		self.render_count = 0  # full renders received
		self.emphasis_count = 0  # emphasis-only updates received

	def render(self, frame: RenderInstructions) -> None:
		self.frame = frame  # full teardown: previous frame is discarded
		self.render_count += 1

	def update_emphasis(self, update: EmphasisUpdate) -> None:
		if self.frame is None or self.frame.scene != update.scene or len(update.emphasis) != len(self.frame.marks):
			# Controller only sends updates for the frame it last rendered
			logger.warning(f"[Renderer] Ignoring emphasis update for scene {update.scene}: no matching frame")
			return
		marks = tuple(replace(mark, emphasis=e) for mark, e in zip(self.frame.marks, update.emphasis))
		self.frame = replace(self.frame, marks=marks)  # axes and annotation untouched
		self.emphasis_count += 1

	def show_insight(self, title: str, body: str) -> None:
		self.insight = Insight(title=title, body=body)
