from dataclasses import dataclass
from pathlib import Path

FORMATS = ("text", "ansi", "html", "markdown")

# Accepted filename extensions per saved format; the first one is appended
# when a name carries none of them.
EXTENSIONS = {
    "html": (".html", ".htm"),
    "markdown": (".md", ".markdown"),
}

ANSI_RESET = "\033[0m"

_HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>ASCII Art</title>
<style>
body {
  background-color: #1a1a2e;
  display: flex;
  justify-content: center;
  align-items: center;
  min-height: 100vh;
  margin: 0;
  padding: 20px;
  box-sizing: border-box;
}
pre {
  font-family: 'Courier New', Courier, monospace;
  font-size: 9px;
  line-height: 1.45;
  letter-spacing: 0.05em;
  white-space: pre;
  background-color: #0f0f1a;
  padding: 20px;
  border-radius: 8px;
  box-shadow: 0 4px 20px rgba(0,0,0,0.5);
}
</style>
</head>
<body>
<pre>"""

_HTML_TAIL = """</pre>
</body>
</html>"""

_MARKDOWN_PRE = (
    "<pre style=\"font-family: 'Courier New', monospace; font-size: 8px; line-height: 1; "
    "letter-spacing: 0.1em; background-color: #0f0f1a; color: #ffffff; padding: 20px; "
    'border-radius: 8px;">\n'
)


def escape(text: str) -> str:
    """Entity-escape &, < and >."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def output_filename(name: str, fmt: str) -> str:
    """Append the format's extension unless the name already has an accepted one."""
    name = name.strip()
    if not name:
        raise ValueError("Filename cannot be empty")
    accepted = EXTENSIONS.get(fmt)
    if accepted and not name.lower().endswith(accepted):
        name += accepted[0]
    return name


@dataclass(frozen=True)
class RenderResult:
    width: int
    height: int
    chars: str  # row-major, width * height characters
    colors: tuple[tuple[int, int, int], ...]  # parallel to chars
    colored: bool

    def rows(self) -> list[str]:
        return [self.chars[y * self.width : (y + 1) * self.width] for y in range(self.height)]

    def _span(self, i: int) -> str:
        r, g, b = self.colors[i]
        return f'<span style="color:rgb({r},{g},{b})">{escape(self.chars[i])}</span>'

    def _html_rows(self, line_end: str) -> str:
        out = []
        for y in range(self.height):
            start = y * self.width
            if self.colored:
                out.append("".join(self._span(i) for i in range(start, start + self.width)))
            else:
                out.append(escape(self.chars[start : start + self.width]))
            out.append(line_end)
        return "".join(out)

    def to_plain_text(self) -> str:
        return "".join(row + "\n" for row in self.rows())

    def to_ansi(self) -> str:
        """Truecolor foreground escapes per character, one reset at the end."""
        if not self.colored:
            return self.to_plain_text()
        out = []
        for y in range(self.height):
            for i in range(y * self.width, (y + 1) * self.width):
                r, g, b = self.colors[i]
                out.append(f"\033[38;2;{r};{g};{b}m{self.chars[i]}")
            out.append("\n")
        out.append(ANSI_RESET)
        return "".join(out)

    def to_html(self) -> str:
        return _HTML_HEAD + self._html_rows("\n") + _HTML_TAIL

    def to_markdown(self) -> str:
        # Markdown has no colour syntax, so coloured output is an inline HTML block
        if self.colored:
            return _MARKDOWN_PRE + self._html_rows("<br/>\n") + "</pre>\n"
        return "```text\n" + self.to_plain_text() + "```\n"

    def render(self, fmt: str) -> str:
        renderers = {
            "text": self.to_plain_text,
            "ansi": self.to_ansi,
            "html": self.to_html,
            "markdown": self.to_markdown,
        }
        if fmt not in renderers:
            raise ValueError(f"Unknown output format: {fmt!r}")
        return renderers[fmt]()

    def save(self, path: str | Path, fmt: str) -> Path:
        path = Path(output_filename(str(path), fmt))
        path.write_text(self.render(fmt), encoding="utf-8")
        return path
