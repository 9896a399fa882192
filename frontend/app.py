"""Streamlit frontend for the Template Preview engine.

Provides a UI for editing a Jinja2 template and its JSON/YAML data block
side by side and previewing the rendered output.
"""

import logging
import os
from typing import Any

import httpx
import streamlit as st
from typing_extensions import TypedDict

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

# Page config
st.set_page_config(
    page_title="Template Preview",
    page_icon="🧩",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """Hello {{ name[1:-1] }}!
Last two items: {{ items | slice(-2) | dump }}
First item: {{ items[0] | dump }}
{% for item in items[1:] %}
- {{ item | substring(0, 1) }}
{% endfor %}
"""

DEFAULT_DATA = {
    "json": '{\n  "name": "World",\n  "items": ["alpha", "beta", "gamma", "delta"]\n}\n',
    "yaml": "name: World\nitems:\n- alpha\n- beta\n- gamma\n- delta\n",
}

FORMAT_LABELS = {"json": "JSON", "yaml": "YAML"}


# =============================================================================
# Type Definitions
# =============================================================================


class RenderResult(TypedDict):
    """Result from the render endpoint."""
    output: str
    error: str | None
    rewritten_template: str | None
    ok: bool


# =============================================================================
# API Client
# =============================================================================


class PreviewAPIClient:
    """API client for template preview endpoints."""

    def __init__(self, base_url: str):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API.
        """
        self.base_url = base_url.rstrip("/")

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            response = httpx.get(f"{self.base_url}/health", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def render(self, template: str, data: str, data_format: str) -> RenderResult | None:
        """Render a template against a data block.

        Args:
            template: Template source.
            data: Data block text.
            data_format: 'json' or 'yaml'.

        Returns:
            RenderResult, or None if the API call itself failed.
        """
        payload = {"template": template, "data": data, "data_format": data_format}

        try:
            response = httpx.post(f"{self.base_url}/preview/render", json=payload, timeout=30.0)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Render failed: {e.response.status_code} - {e.response.text}")
            st.error(f"Render failed: {e.response.status_code}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"Render error: {e}")
            st.error(f"Render error: {e}")
            return None

    def convert(self, data: str, source_format: str, target_format: str) -> str | None:
        """Convert a data block between formats.

        Args:
            data: Data block text.
            source_format: Current format.
            target_format: Desired format.

        Returns:
            The converted data block, or None if conversion failed.
        """
        payload = {
            "data": data,
            "source_format": source_format,
            "target_format": target_format,
        }

        try:
            response = httpx.post(f"{self.base_url}/preview/convert", json=payload, timeout=30.0)
            response.raise_for_status()
            return response.json()["data"]
        except httpx.HTTPStatusError as e:
            try:
                detail: Any = e.response.json().get("detail", e.response.text)
            except ValueError:
                detail = e.response.text
            logger.error(f"Conversion failed: {e.response.status_code} - {detail}")
            st.error(f"Cannot convert data: {detail}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"Conversion error: {e}")
            st.error(f"Conversion error: {e}")
            return None


# =============================================================================
# UI Components
# =============================================================================


def render_sidebar(client: PreviewAPIClient) -> None:
    """Render the sidebar with connection status and syntax help.

    Args:
        client: The API client instance.
    """
    with st.sidebar:
        st.title("🧩 Template Preview")

        st.divider()

        # Connection status
        if client.health_check():
            st.success("✅ API Connected")
        else:
            st.error("❌ API Disconnected")
            st.info(f"API URL: {API_BASE_URL}")

        st.divider()

        st.subheader("Slice Syntax")
        st.markdown("""
        - `{{ name[1:-1] }}` drop first and last character
        - `{{ name[:3] }}` / `{{ name[3:] }}` prefix / suffix
        - `{{ items[2] }}` one-item slice at index 2
        - `{{ users.0.name }}` element attribute (`users[0].name` is a one-item slice, so `.name` cannot follow it)
        - `{{ items | slice(-2) }}` last two items
        - `{{ name | substring(1, 3) }}` JavaScript substring
        - `{{ items | dump(2) }}` JSON with indent
        """)

        st.divider()

        st.caption(f"API: `{API_BASE_URL}`")


def on_format_change(client: PreviewAPIClient) -> None:
    """Convert the data block when the format toggle changes."""
    previous = st.session_state.data_format
    selected = st.session_state.format_toggle

    converted = client.convert(st.session_state.data_text, previous, selected)
    if converted is None:
        # Keep the data in its old format so it stays parseable
        st.session_state.format_toggle = previous
        return

    st.session_state.data_text = converted
    st.session_state.data_format = selected


def render_editors(client: PreviewAPIClient) -> None:
    """Render the template and data editors side by side.

    Args:
        client: The API client instance.
    """
    col1, col2 = st.columns([1, 1])

    with col1:
        st.subheader("📝 Template")
        st.text_area(
            "Template",
            key="template_text",
            height=320,
            label_visibility="collapsed",
        )

    with col2:
        st.subheader("📦 Data")
        st.radio(
            "Data format",
            options=list(FORMAT_LABELS),
            format_func=FORMAT_LABELS.get,
            key="format_toggle",
            horizontal=True,
            on_change=on_format_change,
            args=(client,),
        )
        st.text_area(
            "Data",
            key="data_text",
            height=260,
            label_visibility="collapsed",
        )


def render_output() -> None:
    """Render the output panel from the last render result."""
    st.subheader("📄 Output")

    result: RenderResult | None = st.session_state.render_result
    if result is None:
        st.info("Click **Render** to preview the template.")
        return

    if not result["ok"]:
        st.error(result["error"])

    st.code(result["output"], language="text")

    if st.session_state.show_rewritten and result["rewritten_template"] is not None:
        with st.expander("🔁 Rewritten Template", expanded=True):
            st.code(result["rewritten_template"], language="jinja2")


# =============================================================================
# Main App
# =============================================================================


def init_session_state() -> None:
    """Initialize session state variables."""
    if "data_format" not in st.session_state:
        st.session_state.data_format = "json"
    if "format_toggle" not in st.session_state:
        st.session_state.format_toggle = st.session_state.data_format
    if "template_text" not in st.session_state:
        st.session_state.template_text = DEFAULT_TEMPLATE
    if "data_text" not in st.session_state:
        st.session_state.data_text = DEFAULT_DATA[st.session_state.data_format]
    if "render_result" not in st.session_state:
        st.session_state.render_result = None
    if "show_rewritten" not in st.session_state:
        st.session_state.show_rewritten = False


def main() -> None:
    """Main application entry point."""

    init_session_state()

    client = PreviewAPIClient(API_BASE_URL)

    render_sidebar(client)

    st.title("Template Preview")
    st.markdown("Render Jinja2 templates with Python-style slices against JSON or YAML data")

    st.divider()

    render_editors(client)

    col1, col2 = st.columns([1, 3])
    with col1:
        if st.button("▶️ Render", type="primary", use_container_width=True):
            # Every render replaces the previous result, failed renders included
            st.session_state.render_result = client.render(
                st.session_state.template_text,
                st.session_state.data_text,
                st.session_state.data_format,
            )
    with col2:
        st.checkbox("Show rewritten template", key="show_rewritten")

    st.divider()

    render_output()


if __name__ == "__main__":
    main()
