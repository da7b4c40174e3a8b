"""Formalization: Markdown level-2 heading plus bullet list."""

from .base import Formalization


class MarkdownFormalization(Formalization):
    """Markdown output; a bullet list needs no opening or closing markup."""

    def make_caption(self, caption: str) -> str:
        return f"## {caption}\n\n"

    def begin_list(self) -> str:
        return ""

    def make_item(self, label: str, value_text: str) -> str:
        return f" * **{label}**: {value_text}\n\n"

    def end_list(self) -> str:
        return ""
