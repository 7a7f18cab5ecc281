import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import streamlit as st

from chromatic.errors import NotEnoughColorsError
from chromatic.evaluation import summary, coloring_frame
from chromatic.graph_build import (
    graph_from_edges, random_graph, complete_graph, bipartite_graph, crown_graph, sudoku_graph
)
from chromatic.io_utils import load_edge_list_csv, load_palette, parse_assignments
from chromatic.solver import ALGORITHMS, color_graph, make_palette

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="Chromatic – Graph Coloring", layout="wide")
st.title("Chromatic – Greedy & Backtracking Graph Coloring")


def _bytes_of(upload):
    if upload is None:
        return None
    return upload.getvalue()

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def build_graph_from_edges_cached(edges_bytes: bytes):
    return graph_from_edges(load_edge_list_csv(io.BytesIO(edges_bytes)))

@st.cache_data
def load_palette_cached(palette_bytes: bytes):
    return load_palette(io.BytesIO(palette_bytes))

@st.cache_data
def build_generated_cached(kind: str, n: int, p: float, seed: int = 42):
    if kind == "Random":
        return random_graph(n, p, seed=seed)
    if kind == "Complete":
        return complete_graph(n)
    if kind == "Bipartite":
        return bipartite_graph(n)
    if kind == "Crown":
        return crown_graph(n)
    G, _ = sudoku_graph()
    return G

# ---------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------
st.subheader("Inputs")
mode = st.radio("Input mode", ["Edge list CSV", "Generated"], horizontal=True)
algo = st.selectbox("Algorithm", list(ALGORITHMS), index=0)

with st.form("controls"):
    if mode == "Edge list CSV":
        edges_file = st.file_uploader("Edge list CSV (u,v)", type=["csv"])
        kind, n, p = None, None, None
    else:
        edges_file = None
        kind = st.selectbox("Graph", ["Random", "Complete", "Bipartite", "Crown", "Sudoku"])
        n = st.number_input("Nodes (N)", 1, 2000, 30, step=1)
        p = st.slider("Edge probability (random only)", 0.01, 0.9, 0.15)

    c1, c2 = st.columns(2)
    k = c1.number_input("Palette size (K)", 0, 500, 4, step=1)
    palette_file = c2.file_uploader("(Optional) Palette file, one color per line", type=["txt"])
    fixed_text = ""
    if algo == "backtracking":
        fixed_text = st.text_area("Pre-colored nodes, one NODE=COLOR per line", "")

    submitted = st.form_submit_button("Color graph")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    if mode == "Edge list CSV":
        if edges_file is None:
            st.error("Please upload an edge list CSV.")
            st.stop()
        G = build_graph_from_edges_cached(_bytes_of(edges_file))
    else:
        G = build_generated_cached(kind, int(n), float(p))

    palette_bytes = _bytes_of(palette_file)
    palette = load_palette_cached(palette_bytes) if palette_bytes else make_palette(int(k))

    t0 = time.perf_counter()
    try:
        lines = [ln for ln in fixed_text.splitlines() if ln.strip()]
        partial = parse_assignments(lines, palette) if lines else None
        result = color_graph(G, palette, algo=algo, partial=partial)
    except NotEnoughColorsError as e:
        st.subheader("Summary")
        st.text(summary(G, palette, None, algo))
        st.error(str(e))
        st.stop()
    except ValueError as e:
        st.error(str(e))
        st.stop()
    t1 = time.perf_counter()

    st.subheader("Summary")
    st.text(summary(G, palette, result, algo))
    st.caption(f"Coloring time: {t1 - t0:.3f}s")

    df = coloring_frame(result)
    st.dataframe(df, use_container_width=True)
    st.bar_chart(df.groupby("color").size().rename("nodes"))
    st.success("Coloring complete.")
