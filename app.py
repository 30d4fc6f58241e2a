import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from components.benchmark import BenchConfig, run_benchmark
from components.work_loads import WorkLoad
from tries.standard_trie import Trie

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Configure page
st.set_page_config(
    page_title="Sorted Trie Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def build_trie(num_words, p_freq, seed):
    trie = Trie()
    trie.batch_insert(WorkLoad(seed).words(num_words, p_freq=p_freq))
    return trie


# Main title
st.title("🌳 Sorted Trie Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Benchmark", "Prefix Explorer"]
    )

    st.markdown("---")
    st.subheader("Workload")
    seed = st.number_input("Seed", min_value=0, value=42, step=1)
    p_freq = st.slider("Prefix frequency", min_value=0.0, max_value=1.0, value=0.3, step=0.05)

# Main content area
if page == "Home":
    st.header("Prefix Tree Benchmarks")

    st.markdown("""
    Build tries from synthetic word workloads and measure them:

    **Sections:**
    - ⏱️ Benchmark: median / p95 timings per operation and workload size
    - 🔍 Prefix Explorer: sorted prefix listing over a generated workload
    """)

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    sizes_text = st.text_input("Workload sizes (comma separated)", "1000, 5000, 10000")
    col1, col2 = st.columns(2)
    with col1:
        repeats = st.number_input("Repeats", min_value=1, value=3, step=1)
    with col2:
        probes = st.number_input("Probe prefixes per run", min_value=1, value=100, step=10)

    if st.button("▶️ Run benchmark"):
        try:
            config = BenchConfig(
                sizes=[int(s) for s in sizes_text.split(",") if s.strip()],
                prefix_freq=p_freq,
                repeats=int(repeats),
                seed=int(seed),
                probe_prefixes=int(probes),
            )
        except ValueError as e:
            st.error(f"❌ Invalid settings: {e}")
        else:
            with st.spinner("Running..."):
                st.session_state['results'] = run_benchmark(config)

    if 'results' in st.session_state:
        df = st.session_state['results']

        st.subheader("Median time by workload size")
        fig = px.line(df, x="size", y="median_ms", color="operation", markers=True,
                      title="Median time (ms) vs workload size")
        st.plotly_chart(fig, use_container_width=True)

        st.subheader("Trie shape")
        shape = df.drop_duplicates("size")[["size", "words", "nodes", "avg_branch_factor"]]
        st.dataframe(shape.reset_index(drop=True))

        st.subheader("Raw Results")
        st.dataframe(df, use_container_width=True)
    else:
        st.info("👆 Choose settings and run the benchmark")

elif page == "Prefix Explorer":
    st.header("🔍 Prefix Explorer")

    num_words = st.number_input("Words in workload", min_value=1, value=2000, step=500)
    trie = build_trie(int(num_words), p_freq, int(seed))

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Words", f"{len(trie):,}")
    with col2:
        st.metric("Nodes", f"{trie.count_nodes():,}")
    with col3:
        st.metric("Avg branch factor", f"{trie.count_nodes(get_avg_branch_factor=True):.2f}")

    prefix = st.text_input("Prefix", "")
    limit = st.slider("Max results", min_value=10, max_value=500, value=100, step=10)

    if trie.contains_prefix(prefix):
        matches = list(trie.enumerate_prefix(prefix, k=limit))
        st.success(f"✅ Prefix '{prefix}' found, showing {len(matches)} word(s)")
        st.dataframe(pd.DataFrame({"word": matches}), use_container_width=True)
    else:
        st.warning(f"⚠️ No words start with '{prefix}'")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Sorted Trie Bench
    </div>
    """,
    unsafe_allow_html=True
)
