"""Download and cache puzzle inputs and descriptions."""

from __future__ import annotations

import os
import re
import threading
from enum import Enum
from html.parser import HTMLParser
from pathlib import Path

import requests

AOC_SESSION_ENV_VAR = "AOC_SESSION"
AOC_BASE_URL = "https://adventofcode.com"
DATA_DIR_NAME = "aoc_data"
USER_AGENT = "aockit puzzle data fetcher"
REQUEST_TIMEOUT = 60


class FetchError(Exception):
    """Raised when puzzle data cannot be obtained."""


class _SessionStore:
    """Session id, read from the environment on first use."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loaded = False
        self._value: str | None = None

    def get(self) -> str | None:
        with self._lock:
            if not self._loaded:
                self._value = os.environ.get(AOC_SESSION_ENV_VAR)
                self._loaded = True
            return self._value

    def set(self, value: str | None) -> None:
        with self._lock:
            self._value = value
            self._loaded = True


_SESSION = _SessionStore()


def set_session(session_id: str | None) -> None:
    """Set the session id used for downloads; None means no session."""
    _SESSION.set(session_id)


class AocDataType(Enum):
    """The kinds of puzzle data that can be fetched."""

    TEXT = "text.md"
    INPUT = "input"

    @property
    def file_name(self) -> str:
        return self.value

    def fetch(self, day: int, year: int) -> str:
        if self is AocDataType.TEXT:
            return process_puzzle_html(_fetch_from_aoc(f"{year}/day/{day}"))
        return _fetch_from_aoc(f"{year}/day/{day}/input")


def find_data_dir(start: str | os.PathLike) -> Path:
    """Find the nearest data directory at or above start, or name one in start."""
    start = Path(start)
    for directory in (start, *start.parents):
        candidate = directory / DATA_DIR_NAME
        if candidate.exists():
            return candidate
    return start / DATA_DIR_NAME


def get_aoc_data(data_type: AocDataType, day: int, year: int) -> str:
    """Return cached puzzle data, downloading and caching it when missing."""
    data_dir = find_data_dir(Path.cwd()) / str(year) / str(day)
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / data_type.file_name
    if not path.exists():
        data = data_type.fetch(day, year)
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(data)
        return data
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(str(exc)) from exc


def _fetch_from_aoc(path: str) -> str:
    session = _SESSION.get()
    if session is None:
        raise FetchError(f"Cannot download input, {AOC_SESSION_ENV_VAR} unavailable")
    try:
        response = requests.get(
            f"{AOC_BASE_URL}/{path}",
            headers={"cookie": f"session={session}", "User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc
    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"Downloading input failed: {response.status_code} {response.reason}; "
            f"{response.text}"
        )
    return response.text


_ARTICLE = re.compile(
    r'<article class="day-desc">(.+?)</article>', re.MULTILINE | re.DOTALL
)
_LINE_ENDINGS = re.compile(r"</p>|</pre>")
_STRONG_BLOCK = re.compile(r"<code><em>([^<]*)</em></code>")
_HEADINGS = {f"h{level}": level for level in range(1, 7)}


def extract_puzzle_text(text: str) -> str:
    """Return the puzzle articles of a page, separated by rules."""
    return "\n***\n".join(_ARTICLE.findall(text))


class _MarkdownBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._pre_depth = 0
        self._list_depth = 0
        self._links: list[tuple[int, str]] = []

    def _at_line_start(self) -> bool:
        for part in reversed(self._parts):
            if part:
                return part.endswith("\n")
        return True

    def _newline(self) -> None:
        if not self._at_line_start():
            self._parts.append("\n")

    def handle_starttag(self, tag, attrs):
        if tag in _HEADINGS:
            self._newline()
            self._parts.append("#" * _HEADINGS[tag] + " ")
        elif tag == "p":
            self._newline()
        elif tag == "pre":
            self._newline()
            self._parts.append("```\n")
            self._pre_depth += 1
        elif tag == "code":
            if not self._pre_depth:
                self._parts.append("`")
        elif tag in ("em", "i"):
            self._parts.append("*")
        elif tag in ("strong", "b"):
            self._parts.append("**")
        elif tag == "a":
            self._links.append((len(self._parts), dict(attrs).get("href") or ""))
        elif tag in ("ul", "ol"):
            self._newline()
            self._list_depth += 1
        elif tag == "li":
            self._newline()
            self._parts.append("  " * max(self._list_depth - 1, 0) + "- ")
        elif tag == "br":
            self._parts.append("\n")

    def handle_endtag(self, tag):
        if tag in _HEADINGS or tag == "p":
            self._newline()
            self._parts.append("\n")
        elif tag == "pre":
            self._newline()
            self._parts.append("```\n\n")
            self._pre_depth = max(self._pre_depth - 1, 0)
        elif tag == "code":
            if not self._pre_depth:
                self._parts.append("`")
        elif tag in ("em", "i"):
            self._parts.append("*")
        elif tag in ("strong", "b"):
            self._parts.append("**")
        elif tag == "a" and self._links:
            start, href = self._links.pop()
            text = "".join(self._parts[start:])
            del self._parts[start:]
            self._parts.append(f"[{text}]({href})" if href else text)
        elif tag in ("ul", "ol"):
            self._list_depth = max(self._list_depth - 1, 0)
            self._newline()
            if not self._list_depth:
                self._parts.append("\n")
        elif tag == "li":
            self._newline()

    def handle_data(self, data):
        if not self._pre_depth and not data.strip() and self._at_line_start():
            return
        self._parts.append(data)

    def markdown(self) -> str:
        return "".join(self._parts).strip("\n")


def html_to_markdown(html: str) -> str:
    """Render a fragment of puzzle HTML as Markdown."""
    builder = _MarkdownBuilder()
    builder.feed(html)
    builder.close()
    return builder.markdown()


def process_puzzle_html(text: str) -> str:
    """Turn a puzzle page into a Markdown description."""
    text = extract_puzzle_text(text)
    text = _LINE_ENDINGS.sub(lambda match: "\n" + match.group(0), text)
    text = _STRONG_BLOCK.sub(r"<strong>\1</strong>", text)
    return html_to_markdown(f"<div>{text}</div>")