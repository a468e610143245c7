"""toro demo - A map built before render and changed live from the sidebar.

Shows a few New Zealand towns and a region polygon, a control panel with
grouped controls, a draw toolbar and an animated route.

Run: streamlit run toro/app.py
"""

import datetime
import logging

import geopandas as gpd
import streamlit as st
from shapely.geometry import LineString, Point, Polygon

import toro
from toro.constants import TileConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MAP_ID = "demo_map"
BASEMAPS = ["light-grey", "satellite", "topo"]

TOWNS = [
    ("Auckland", 174.76, -36.85, 1_700_000),
    ("Wellington", 174.78, -41.29, 215_000),
    ("Christchurch", 172.64, -43.53, 390_000),
    ("Dunedin", 170.50, -45.87, 135_000),
    ("Queenstown", 168.66, -45.03, 30_000),
]


# =============================================================================
# DATA
# =============================================================================


def load_towns() -> gpd.GeoDataFrame:
    return gpd.GeoDataFrame(
        {
            "name": [name for name, *_ in TOWNS],
            "population": [pop for *_, pop in TOWNS],
        },
        geometry=[Point(lon, lat) for _, lon, lat, _ in TOWNS],
        crs="EPSG:4326",
    )


def load_region() -> gpd.GeoDataFrame:
    canterbury = Polygon([(170.0, -42.0), (174.0, -42.0), (174.0, -44.5), (170.0, -44.5)])
    return gpd.GeoDataFrame({"name": ["Canterbury"], "kind": ["region"]}, geometry=[canterbury], crs="EPSG:4326")


def load_route() -> gpd.GeoDataFrame:
    points = [Point(lon, lat) for _, lon, lat, _ in TOWNS]
    return gpd.GeoDataFrame({"stop": list(range(len(points)))}, geometry=points, crs="EPSG:4326")


# =============================================================================
# MAP
# =============================================================================


def build_map() -> toro.MapWidget:
    """Build the first-render state of the demo map."""
    towns = load_towns()

    widget = toro.create_map(
        element_id=MAP_ID,
        center=(172.5, -41.5),
        zoom=4,
        loaded_tiles=BASEMAPS,
    )
    toro.add_source(widget, "towns", towns)
    toro.add_source(widget, "region", load_region())

    toro.add_fill_layer(
        widget,
        "region-fill",
        "region",
        paint=toro.get_paint_options("fill", {"colour": "#4a90d9", "opacity": 0.3, "outline_colour": "#1f4e79"}),
        hover_column="name",
    )
    toro.add_circle_layer(
        widget,
        "towns-circle",
        "towns",
        paint=toro.get_paint_options(
            "circle",
            {
                "colour": toro.get_column_step_colours(
                    "population", [100_000, 500_000], ["#fdd49e", "#fc8d59", "#d7301f"]
                ),
                "circle_radius": 7,
            },
        ),
        popup_column="name",
        can_cluster=True,
    )
    toro.add_symbol_layer(
        widget,
        "towns-label",
        "towns",
        layout=toro.get_layout_options("symbol", {"text_field": toro.get_column("name"), "text_size": 11}),
        filter="population>=100000",
    )

    toro.add_control_panel(widget, "layers_panel", title="Layers", position="top-left", collapsible=True)
    toro.add_control_group(widget, "layers_panel", "basemap_group", group_title="Basemap")
    toro.add_tile_selector_control(widget, available_tiles=BASEMAPS, panel_id="layers_panel", group_id="basemap_group")
    toro.add_visibility_toggle(widget, "region-fill", panel_id="layers_panel", section_title="Region")
    toro.add_cluster_toggle(widget, "towns-circle", panel_id="layers_panel", section_title="Towns")

    toro.add_zoom_control(widget)
    toro.add_cursor_coords_control(widget)
    toro.add_draw_control(widget, modes=["polygon", "point", "trash"])

    toro.add_route(widget, "tour", load_route(), settings={"duration": 10_000})
    toro.add_timeline_control(widget, start_date=datetime.date(2024, 1, 1), end_date=datetime.date(2024, 12, 31))
    toro.add_speed_control(widget)

    toro.set_bounds(widget, [[166.0, -47.5], [179.0, -34.0]])
    return widget


# =============================================================================
# SIDEBAR (live updates)
# =============================================================================


def render_sidebar() -> None:
    """Sidebar widgets that change the rendered map in place."""
    proxy = toro.map_proxy(MAP_ID)

    st.sidebar.header("Live updates")

    tile = st.sidebar.selectbox("Basemap", TileConfig.OPTIONS, index=TileConfig.OPTIONS.index("light-grey"))
    if st.sidebar.button("Apply basemap"):
        toro.set_tile_layer(proxy, tile)

    show_region = st.sidebar.checkbox("Show region", value=True)
    if show_region:
        toro.show_layer(proxy, "region-fill")
    else:
        toro.hide_layer(proxy, "region-fill")

    colour = st.sidebar.color_picker("Region colour", value="#4a90d9")
    toro.set_paint_property(proxy, "region-fill", "fill-color", colour)

    col1, col2 = st.sidebar.columns(2)
    if col1.button("Play route"):
        toro.animate_route(proxy, "tour")
    if col2.button("Pause route"):
        toro.pause_route(proxy, "tour")

    if st.sidebar.button("Zoom to Canterbury"):
        toro.set_bounds(proxy, [[170.0, -44.5], [174.0, -42.0]], max_zoom=8)

    if st.sidebar.button("Download image"):
        toro.download_map_image(proxy, "toro_demo")


def render_events(events: toro.MapEvents) -> None:
    if events.has_click:
        st.session_state["last_clicked"] = events.clicked_feature
    clicked = st.session_state.get("last_clicked")
    if clicked is not None:
        st.subheader("Clicked feature")
        st.dataframe(clicked.drop(columns="geometry"))

    if events.shape_created is not None:
        st.subheader("Drawn shape")
        st.write(events.shape_created.geometry.iloc[0].wkt)
        if st.button("Delete drawn shape"):
            toro.delete_drawn_shape(toro.map_proxy(MAP_ID), events.shape_created["id"].iloc[0])

    if events.zoom is not None:
        st.caption(f"Zoom {events.zoom:.1f}, bounds {events.bounds}")


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    st.set_page_config(page_title="toro demo", layout="wide")
    st.title("toro demo")

    if "widget" not in st.session_state:
        st.session_state.widget = build_map()
        logger.info(f"Built map {MAP_ID}")

    render_sidebar()
    events = toro.render_map(st.session_state.widget)
    render_events(events)


if __name__ == "__main__":
    main()
