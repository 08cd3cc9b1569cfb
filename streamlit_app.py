"""
Streamlit UI for CineScope.
Shows the three scenes with their controls. Runs fully locally by default, or
talks to the FastAPI server (uvicorn api:app --reload) when API mode is enabled.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# Async runner for the one-time dataset load in local mode
import asyncio  # run SceneSession.start()
# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Local engine imports
from cinescope.charts import build_scene_chart  # Altair rendering of a frame
from cinescope.config import Settings  # env-based defaults
from cinescope.controller import SceneSession  # load-once session
from cinescope.models import ALL_GENRES, CRITICS_SCENE, GENRE_SCENE, TIMELINE_SCENE, ControlEvent
from cinescope.renderers import SnapshotRenderer  # keeps the latest frame in memory
from cinescope.schemas import SceneSnapshot, build_snapshot  # shared wire format

SETTINGS = Settings.from_env()  # data path and API URL defaults

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="CineScope", layout="wide")  # wide layout

# Main page title
st.title("🎬 CineScope – A Century of Top-Rated Films")  # friendly header


class LocalClient:
	"""Drives an in-process session; one per browser session."""

	def __init__(self, data_path: str):
		self.renderer = SnapshotRenderer()  # collects frames and insights
		self.session = SceneSession(data_path, self.renderer)
		asyncio.run(self.session.start())  # listeners are wired only after this returns

	@property
	def error(self):
		return self.session.load_error

	def snapshot(self) -> SceneSnapshot:
		controller = self.session.controller
		return build_snapshot(
			controller.state,
			self.renderer.frame,
			self.renderer.insight,
			genres=self.session.dataset.genres,
			year_extent=self.session.dataset.year_extent,
		)

	def send(self, name: str, value):
		self.session.handle(ControlEvent(name=name, value=value))


class ApiClient:
	"""Same interface as LocalClient, backed by the FastAPI server."""

	def __init__(self, api_url: str):
		self.api_url = api_url  # base URL
		self.error = None  # filled when the server cannot serve scenes
		try:
			h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
			h.raise_for_status()
			if not h.json().get('dataset_ready'):
				self.error = h.json().get('load_error') or "API dataset not loaded"
		except requests.RequestException as e:  # network/API errors
			self.error = f"API not reachable: {e}"

	def snapshot(self) -> SceneSnapshot:
		resp = requests.get(f"{self.api_url}/scene", timeout=10)
		resp.raise_for_status()  # raise error if server responded with an error code
		return SceneSnapshot.model_validate(resp.json())

	def send(self, name: str, value):
		resp = requests.post(f"{self.api_url}/events", json={"name": name, "value": value}, timeout=10)
		resp.raise_for_status()


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	use_api = st.toggle("Use API server", value=False, help="Drive the scenes through the FastAPI server instead of in-process.")
	api_url = st.text_input("API URL", SETTINGS.api_url)  # where the API lives

# Build (or reuse) the client for this browser session
client_key = ('api', api_url) if use_api else ('local', SETTINGS.data_path)
if st.session_state.get('client_key') != client_key:
	with st.spinner("Loading movies..."):
		st.session_state['client'] = ApiClient(api_url) if use_api else LocalClient(SETTINGS.data_path)
		st.session_state['client_key'] = client_key
client = st.session_state['client']

# A failed load leaves the app inert: no scenes, no controls
if client.error:
	st.error(f"Could not load the movie dataset: {client.error}")
	st.stop()


def send(name: str, value):
	"""Forward a widget change to the controller as a control event."""
	try:
		client.send(name, value)
	except requests.RequestException as e:
		st.error(f"API request failed: {e}")


def send_from_widget(name: str, key: str):
	"""on_change callback: read the widget's new value and dispatch it."""
	send(name, st.session_state[key])


try:
	snapshot = client.snapshot()  # state before any widget renders
except requests.RequestException as e:  # network/API errors
	st.error(f"API request failed: {e}")
	st.stop()
state = snapshot.state

# Scene navigation
nav = st.columns(3)
for col, (scene_id, label) in zip(nav, [(TIMELINE_SCENE, "1. Timeline"), (GENRE_SCENE, "2. Genres"), (CRITICS_SCENE, "3. Critics vs Box Office")]):
	with col:
		st.button(
			label,
			key=f"scene{scene_id}-btn",
			type="primary" if state.current_scene == scene_id else "secondary",
			on_click=send,
			args=("sceneSelected", scene_id),
			use_container_width=True,
		)

# Controls for the active scene only
if state.current_scene == TIMELINE_SCENE:
	first_decade = snapshot.year_extent[0] // 10 * 10
	last_decade = snapshot.year_extent[1] // 10 * 10
	st.slider(
		"Decade",
		min_value=first_decade,
		max_value=last_decade,
		value=min(max(state.selected_decade, first_decade), last_decade),
		step=10,
		format="%ds",
		key="decade-slider",
		on_change=send_from_widget,
		args=("decadeChanged", "decade-slider"),
	)
elif state.current_scene == GENRE_SCENE:
	options = [ALL_GENRES] + sorted(snapshot.genres)
	st.selectbox(
		"Genre",
		options,
		index=options.index(state.selected_genre) if state.selected_genre in options else 0,
		format_func=lambda g: "All genres" if g == ALL_GENRES else g,
		key="genre-select",
		on_change=send_from_widget,
		args=("genreChanged", "genre-select"),
	)
else:
	st.slider(
		"Minimum IMDB rating",
		min_value=7.5,
		max_value=9.5,
		value=float(state.min_rating),
		step=0.1,
		key="rating-filter",
		on_change=send_from_widget,
		args=("ratingChanged", "rating-filter"),
	)

# Chart and narrative
frame = snapshot.frame
if frame is not None:
	st.subheader(frame.title)  # scene heading
	st.caption(frame.description)  # scene sub-heading
	st.altair_chart(build_scene_chart(frame), use_container_width=True)
if snapshot.insight is not None:
	st.info(f"**{snapshot.insight.title}**\n\n{snapshot.insight.body}")

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
st.sidebar.caption("Mode: API client" if use_api else f"Mode: Local ({SETTINGS.data_path})")  # mode label
