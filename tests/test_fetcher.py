from unittest import mock

import pytest

from aockit.fetcher import (
    DATA_DIR_NAME,
    AocDataType,
    FetchError,
    extract_puzzle_text,
    find_data_dir,
    get_aoc_data,
    html_to_markdown,
    process_puzzle_html,
    set_session,
)


@pytest.fixture(autouse=True)
def no_session():
    set_session(None)
    yield
    set_session(None)


@pytest.mark.parametrize(
    ("data_type", "file_name", "content"),
    [
        (AocDataType.TEXT, "text.md", "## --- Day 2 ---\n"),
        (AocDataType.INPUT, "input", "10-20\n"),
    ],
)
def test_file_names_select_cache_file(tmp_path, monkeypatch, data_type, file_name, content):
    monkeypatch.chdir(tmp_path)
    day_dir = tmp_path / DATA_DIR_NAME / "2025" / "2"
    day_dir.mkdir(parents=True)
    (day_dir / file_name).write_text(content, encoding="utf-8", newline="")
    assert get_aoc_data(data_type, 2, 2025) == content


def test_find_data_dir_in_ancestor(tmp_path):
    (tmp_path / DATA_DIR_NAME).mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_data_dir(nested) == tmp_path / DATA_DIR_NAME


def test_find_data_dir_defaults_to_start(tmp_path):
    start = tmp_path / "project"
    start.mkdir()
    assert find_data_dir(start) == start / DATA_DIR_NAME


def test_get_aoc_data_reads_cache(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    day_dir = tmp_path / DATA_DIR_NAME / "2025" / "4"
    day_dir.mkdir(parents=True)
    (day_dir / "input").write_text("cached\r\ndata\n", encoding="utf-8", newline="")
    assert get_aoc_data(AocDataType.INPUT, 4, 2025) == "cached\r\ndata\n"


def test_get_aoc_data_without_session(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FetchError, match="Cannot download input, AOC_SESSION unavailable"):
        get_aoc_data(AocDataType.INPUT, 1, 2025)
    assert (tmp_path / DATA_DIR_NAME / "2025" / "1").is_dir()
    assert not (tmp_path / DATA_DIR_NAME / "2025" / "1" / "input").exists()


def test_get_aoc_data_downloads_and_caches(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    set_session("token")
    response = mock.Mock(status_code=200, reason="OK", text="1\n2\n")
    with mock.patch("requests.get", return_value=response) as get:
        assert get_aoc_data(AocDataType.INPUT, 3, 2025) == "1\n2\n"
    url = get.call_args.args[0]
    assert url.endswith("/2025/day/3/input")
    assert get.call_args.kwargs["headers"]["cookie"] == "session=token"
    cached = tmp_path / DATA_DIR_NAME / "2025" / "3" / "input"
    assert cached.read_text(encoding="utf-8") == "1\n2\n"
    assert get_aoc_data(AocDataType.INPUT, 3, 2025) == "1\n2\n"


def test_failed_download_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    set_session("token")
    response = mock.Mock(status_code=404, reason="Not Found", text="missing")
    with mock.patch("requests.get", return_value=response):
        with pytest.raises(FetchError, match="Downloading input failed: 404 Not Found; missing"):
            get_aoc_data(AocDataType.INPUT, 5, 2025)


def test_extract_puzzle_text_joins_articles():
    page = (
        '<main><article class="day-desc">first\npart</article>'
        '<p>x</p><article class="day-desc">second</article></main>'
    )
    assert extract_puzzle_text(page) == "first\npart\n***\nsecond"


def test_extract_without_articles_is_empty():
    assert extract_puzzle_text("<html></html>") == ""


def test_html_to_markdown_emphasis():
    assert html_to_markdown("<p>Hello <em>world</em></p>") == "Hello *world*"


def test_process_puzzle_html():
    page = (
        '<html><article class="day-desc"><h2>--- Day 1 ---</h2>'
        "<p>Answer is <code><em>42</em></code>.</p></article></html>"
    )
    result = process_puzzle_html(page)
    assert result.startswith("## --- Day 1 ---")
    assert "**42**" in result


def test_process_puzzle_html_keeps_code_blocks():
    page = '<article class="day-desc"><pre><code>a\nb</code></pre></article>'
    result = process_puzzle_html(page)
    assert result.startswith("```\na\nb\n")
    assert result.rstrip().endswith("```")