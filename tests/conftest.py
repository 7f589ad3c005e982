"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add source directory to Python path for imports
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from songsheet.models import Song  # noqa: E402
from songsheet.view_state import render_song  # noqa: E402


@pytest.fixture(autouse=True)
def clear_render_cache():
    """Keep memoized renders from leaking between tests"""
    render_song.cache_clear()
    yield
    render_song.cache_clear()


@pytest.fixture
def sample_content():
    """Short song with a key directive, a chord-only intro and a slash chord"""
    return (
        "{key: G}\n"
        "[G] [C] [D]\n"
        "\n"
        "[G]Amazing [C]grace how [G]sweet the sound\n"
        "That saved a [D/F#]wretch like [G]me"
    )


@pytest.fixture
def sample_song(sample_content):
    return Song(
        id='amazing-grace',
        title='Amazing Grace',
        artist='Traditional',
        content=sample_content,
        content_piano="[G]Amazing [G7]grace",
        notes='Capo 2 on the recording',
    )


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path"""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write
