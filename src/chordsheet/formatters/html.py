"""HTML formatter.

Produces the nested ``div`` layout chord-sheet stylesheets expect::

    <div class="chord-sheet">
      <h1>Amazing Grace</h1>
      <div class="row">
        <div class="column"><div class="chord">G</div><div class="lyrics">Amazing </div></div>
        <div class="column"><div class="chord">C</div><div class="lyrics">grace</div></div>
      </div>
      <div class="comment">Chorus</div>
    </div>

Blank lines are dropped unless ``render_blank_lines=True``; stanza spacing
is then left to CSS.  All text is escaped.
"""

from bs4 import BeautifulSoup, Tag

from ..models import DirectiveLine, LyricLine
from .base import SongFormatter

_HEADINGS = {"title": "h1", "subtitle": "h2"}


class HtmlFormatter(SongFormatter):
    """Render a :class:`~chordsheet.models.Song` to an HTML fragment."""

    def __init__(self, render_blank_lines: bool = False):
        self.render_blank_lines = render_blank_lines
        self._soup = BeautifulSoup("", "html.parser")

    def _div(self, css_class: str, text: str | None = None) -> Tag:
        tag = self._soup.new_tag("div", attrs={"class": css_class})
        if text is not None:
            tag.string = text
        return tag

    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        row = self._div("row")
        for segment in line.segments:
            column = self._div("column")
            chord = segment.chord.spelled(flats) if segment.chord else ""
            column.append(self._div("chord", chord))
            column.append(self._div("lyrics", segment.lyrics))
            row.append(column)
        return [str(row)]

    def render_directive_line(self, line: DirectiveLine) -> list[str]:
        if not line.value:
            return []
        if line.is_comment:
            return [str(self._div("comment", line.value))]
        if line.key in _HEADINGS:
            heading = self._soup.new_tag(_HEADINGS[line.key])
            heading.string = line.value
            return [str(heading)]
        return []

    def render_blank_line(self) -> list[str]:
        if not self.render_blank_lines:
            return []
        return [str(self._div("empty-line"))]

    def join(self, parts: list[str]) -> str:
        if not parts:
            return ""
        return '<div class="chord-sheet">' + "".join(parts) + "</div>"
