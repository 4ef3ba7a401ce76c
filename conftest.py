import io
import pytest
from tikzpicture import TikzPicture


@pytest.fixture
def sink() -> io.StringIO:
    """Provides an in-memory text stream that captures the output."""
    return io.StringIO()


@pytest.fixture
def picture(sink: io.StringIO) -> TikzPicture:
    """Provides a TikzPicture writing to `sink` with precision 2."""
    pic = TikzPicture()
    pic.set_stream(sink, precision=2)
    return pic
