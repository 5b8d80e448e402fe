import asyncio

import streamlit as st

# Configuration
from storefront.config import get_config
from storefront.logging_config import get_logger

# DataSource factory + page router
from storefront.data.errors import ResourceLoadError
from storefront.data.util import get_data_source
from storefront.views.renderer import StreamlitRenderer
from storefront.views.router import PAGES, dispatch, resolve_page

config = get_config()
logger = get_logger(__name__)

st.set_page_config(page_title=config.app_title, layout="wide")

# -----------------------------------------------------------------------------
# Styling shared by all pages
# -----------------------------------------------------------------------------
st.markdown(
    """
    <style>
    .kpi { background: rgba(0, 0, 0, 0.04); border-radius: 8px; padding: 12px 16px; }
    .kpi .value { font-size: 28px; font-weight: 700; }
    .muted { color: #888888; }
    table.data { width: 100%; border-collapse: collapse; }
    table.data td, table.data th { padding: 6px 10px; border-bottom: 1px solid #e5e5e5; text-align: left; }
    table.data td.right { text-align: right; }
    </style>
    """,
    unsafe_allow_html=True,
)

# -----------------------------------------------------------------------------
# Sidebar navigation
# -----------------------------------------------------------------------------
st.sidebar.header(config.app_title)
for page in PAGES.values():
    if page.in_navigation:
        st.sidebar.markdown(f'<a href="?page={page.name}" target="_self">{page.title}</a>', unsafe_allow_html=True)

# -----------------------------------------------------------------------------
# Page layout: one placeholder per container, KPI cards side by side
# -----------------------------------------------------------------------------
params = {key: st.query_params[key] for key in st.query_params.keys()}
page = resolve_page(params.get("page"), config.default_page)

if page is not None:
    st.title(page.title)
    kpi_ids = [cid for cid, wrapper in page.containers.items() if 'class="kpi"' in wrapper]
    placeholders = {}
    if kpi_ids:
        for col, cid in zip(st.columns(len(kpi_ids)), kpi_ids):
            placeholders[cid] = col.empty()
    for cid in page.container_ids:
        if cid not in placeholders:
            placeholders[cid] = st.empty()

    renderer = StreamlitRenderer(placeholders, page.containers)
    source = get_data_source()
    try:
        asyncio.run(dispatch(page.name, source, renderer, params))
    except ResourceLoadError as e:
        # Nothing is rendered for a page whose datasets failed to load
        logger.error(f"Page '{page.name}' not rendered: {e}")
else:
    logger.debug(f"Unknown page requested: {params.get('page')}")

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
with st.expander("Data source"):
    st.write(
        f"Datasets are read as static JSON via the **{config.data_source}** data source "
        f"(`{config.data_base_url if config.data_source == 'http' else config.data_dir}`)."
    )
