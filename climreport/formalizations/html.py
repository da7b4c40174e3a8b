"""Formalization: HTML heading plus unordered list."""

import html

from .base import Formalization


class HtmlFormalization(Formalization):
    """HTML output matching historical reports.

    Text is inserted as given, and items are emitted as
    ``<li><b>label</b>: value`` with no closing ``</li>``; browsers close
    them implicitly.  ClosedItemHtmlFormalization emits balanced tags and
    EscapedHtmlFormalization escapes ``&``, ``<`` and ``>``.
    """

    def make_caption(self, caption: str) -> str:
        return f"<h1>{caption}</h1>"

    def begin_list(self) -> str:
        return "<ul>"

    def make_item(self, label: str, value_text: str) -> str:
        return f"<li><b>{label}</b>: {value_text}"

    def end_list(self) -> str:
        return "</ul>"


class ClosedItemHtmlFormalization(HtmlFormalization):
    """HtmlFormalization with every list item closed."""

    def make_item(self, label: str, value_text: str) -> str:
        return super().make_item(label, value_text) + "</li>"


class EscapedHtmlFormalization(ClosedItemHtmlFormalization):
    """Balanced HTML safe for captions, labels and values containing markup."""

    def make_caption(self, caption: str) -> str:
        return super().make_caption(html.escape(caption, quote=False))

    def make_item(self, label: str, value_text: str) -> str:
        return super().make_item(
            html.escape(label, quote=False), html.escape(value_text, quote=False)
        )
