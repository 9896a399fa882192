"""Unit tests for the Jinja2 preview renderer."""

import pytest

from template_preview.core.config import Settings
from template_preview.core.factory import ComponentFactory
from template_preview.interfaces.renderer import RenderResult, TemplateRenderError


# =============================================================================
# Jinja Preview Renderer Tests
# =============================================================================


class TestJinjaPreviewRenderer:
    """Test suite for JinjaPreviewRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a renderer from default settings."""
        return ComponentFactory(Settings(_env_file=None)).create_renderer()

    # =========================================================================
    # End-to-End Render Tests
    # =========================================================================

    def test_drop_first_and_last_character(self, renderer):
        """Test the slice-syntax greeting example."""
        result = renderer.render("Hello {{ name[1:-1] }}", '{"name": "World"}')

        assert result == RenderResult(
            output="Hello orl",
            rewritten_template="Hello {{ name | slice(1,-1) }}",
        )
        assert result.ok

    def test_slice_and_dump_chain(self, renderer):
        """Test filter chaining with compact JSON output."""
        result = renderer.render(
            "{{ items | slice(-2) | dump }}",
            '{"items": ["a", "b", "c", "d"]}',
        )

        assert result.output == '["c","d"]'

    def test_point_index_yields_one_character(self, renderer):
        """Test that [i] renders a length-1 string."""
        result = renderer.render("{{ x[2] }}", '{"x": "abcdef"}')
        assert result.output == "c"

    def test_point_index_on_list_yields_one_item_list(self, renderer):
        """Test that [i] on a list renders a one-item list, not the element."""
        data = '{"items": ["a", "b", "c", "d"]}'

        assert renderer.render("{{ items[0] | dump }}", data).output == '["a"]'
        assert renderer.render("{{ items[-2] | dump }}", data).output == '["c"]'

    def test_last_index_renders_empty(self, renderer):
        """Test that [-1] resolves to slice(-1,0) and selects nothing."""
        assert renderer.render("{{ items[-1] | dump }}", '{"items": ["a", "b"]}').output == "[]"
        assert renderer.render("[{{ x[-1] }}]", '{"x": "abc"}').output == "[]"

    def test_prefix_and_suffix(self, renderer):
        """Test omitted range bounds."""
        data = '{"x": "abcdef"}'

        assert renderer.render("{{ x[:3] }}", data).output == "abc"
        assert renderer.render("{{ x[3:] }}", data).output == "def"

    def test_loop_over_slice(self, renderer):
        """Test slice syntax in a for-loop iterable."""
        result = renderer.render(
            "{% for i in items[1:] %}{{ i }},{% endfor %}",
            '{"items": [1, 2, 3]}',
        )
        assert result.output == "2,3,"

    def test_element_attribute_uses_dot_index(self, renderer):
        """Test that [i] before an attribute fails and the dot index works."""
        data = '{"users": [{"name": "Ann"}, {"name": "Bo"}]}'

        bracketed = renderer.render("{{ users[0].name }}", data)
        assert not bracketed.ok
        assert bracketed.error.startswith("Template error:")

        assert renderer.render("{{ users.0.name }}", data).output == "Ann"

    def test_block_newlines_are_kept_by_default(self, renderer):
        """Test that the newline after a block tag is kept."""
        result = renderer.render(
            "{% for i in items %}\n{{ i }}{% endfor %}",
            '{"items": [1, 2]}',
        )
        assert result.output == "\n1\n2"

    def test_trim_blocks_setting(self):
        """Test that trim_blocks removes the newline after a block tag."""
        renderer = ComponentFactory(
            Settings(_env_file=None, trim_blocks=True)
        ).create_renderer()

        result = renderer.render(
            "{% for i in items %}\n{{ i }}{% endfor %}",
            '{"items": [1, 2]}',
        )
        assert result.output == "12"

    def test_substring_filter(self, renderer):
        """Test the JavaScript-style substring filter in a template."""
        result = renderer.render("{{ s | substring(3, 1) }}", '{"s": "abcdef"}')
        assert result.output == "bc"

    def test_non_collection_value_renders_unchanged(self, renderer):
        """Test identity fallback through a template."""
        result = renderer.render("{{ n[0] }}", '{"n": 42}')
        assert result.output == "42"

    def test_yaml_data(self, renderer):
        """Test rendering against YAML data."""
        result = renderer.render("Hello {{ name[1:-1] }}", "name: World\n", "yaml")
        assert result.output == "Hello orl"

    def test_empty_data(self, renderer):
        """Test that empty data renders against an empty context."""
        assert renderer.render("Hello", "").output == "Hello"

    # =========================================================================
    # Error Boundary Tests
    # =========================================================================

    def test_truncated_json_clears_output(self, renderer):
        """Test that malformed data yields an error and empty output."""
        result = renderer.render("Hello {{ name }}", '{"name": "Wor')

        assert not result.ok
        assert result.output == ""
        assert result.error.startswith("Data error: Invalid JSON")
        assert result.rewritten_template is None

    def test_non_mapping_data(self, renderer):
        """Test that top-level arrays are rejected."""
        result = renderer.render("{{ x }}", "[1, 2]")

        assert not result.ok
        assert result.output == ""

    def test_unknown_format(self, renderer):
        """Test that an unknown format is reported as a data error."""
        result = renderer.render("{{ x }}", "x = 1", "toml")

        assert result.output == ""
        assert "Unknown data format: toml" in result.error

    def test_template_syntax_error(self, renderer):
        """Test that unbalanced blocks produce a template error."""
        result = renderer.render("{% if x %}open", '{"x": true}')

        assert not result.ok
        assert result.output == ""
        assert result.error.startswith("Template error: line 1:")
        assert result.rewritten_template == "{% if x %}open"

    def test_evaluation_error(self, renderer):
        """Test that runtime errors are caught at the render boundary."""
        result = renderer.render("{{ 1 / n }}", '{"n": 0}')

        assert result.output == ""
        assert "ZeroDivisionError" in result.error

    def test_deeply_nested_json_is_a_data_error(self, renderer):
        """Test that JSON deep enough to exhaust recursion is reported, not raised."""
        depth = 100000
        result = renderer.render("{{ a }}", "[" * depth + "]" * depth, "json")

        assert not result.ok
        assert result.output == ""
        assert result.error == "Data error: Invalid JSON: nested too deeply"

    def test_deeply_nested_yaml_is_a_data_error(self, renderer):
        """Test that YAML deep enough to exhaust recursion is reported, not raised."""
        depth = 5000
        result = renderer.render("{{ a }}", "a: " + "[" * depth + "]" * depth, "yaml")

        assert not result.ok
        assert result.output == ""
        assert result.error.startswith("Data error: Invalid YAML")

    def test_deeply_nested_template_is_a_template_error(self, renderer):
        """Test that a template too deep to compile is reported, not raised."""
        depth = 5000
        result = renderer.render("{{ " + "(" * depth + "1" + ")" * depth + " }}", "{}")

        assert not result.ok
        assert result.output == ""
        assert result.error.startswith("Template error: template is nested too deeply")

    def test_render_template_raises(self, renderer):
        """Test that render_template propagates TemplateRenderError."""
        with pytest.raises(TemplateRenderError):
            renderer.render_template("{% for %}", {})

    def test_undefined_renders_empty_by_default(self, renderer):
        """Test lenient undefined handling."""
        assert renderer.render("[{{ missing }}]", "{}").output == "[]"

    def test_strict_undefined(self):
        """Test that strict mode reports undefined variables."""
        renderer = ComponentFactory(
            Settings(_env_file=None, strict_undefined=True)
        ).create_renderer()

        result = renderer.render("{{ missing }}", "{}")

        assert not result.ok
        assert "missing" in result.error

    def test_each_render_starts_fresh(self, renderer):
        """Test that a failed render does not return the previous output."""
        assert renderer.render("{{ x }}", '{"x": 1}').output == "1"
        assert renderer.render("{{ x }}", '{"x": ').output == ""
