import pytest

from procTestUtils import writeFile


@pytest.fixture
def fireworks(tmp_path):
    """src/2014/0704 - fireworks/proc with one image and one text file."""
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    procDir = src / "2014" / "0704 - fireworks" / "proc"
    writeFile(procDir / "a.jpg", b"0123456789", mtime=1_400_000_000)
    writeFile(procDir / "notes.txt", b"not an image")
    dst.mkdir()
    return src, dst
