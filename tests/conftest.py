import io
import random

import pytest
from PIL import Image

from screenshot_capture import transport
from screenshot_capture.plugins import Screenshot, ScreenshotHandler, ScreenshotPlugin


class FakeInstrument:
    """Stands in for a pyvisa MessageBasedResource."""

    def __init__(self, responses=(), read_error=None):
        self.responses = list(responses)
        self.read_error = read_error
        self.written = []
        self.timeout = "unset"
        self.read_termination = "\n"
        self.write_termination = None
        self.closed = False

    def write(self, command):
        self.written.append(command)

    def read_raw(self, size=None):
        if self.read_error is not None:
            raise self.read_error
        return self.responses.pop(0)

    def close(self):
        self.closed = True


class FakeResourceManager:
    def __init__(self, instrument=None, open_error=None):
        self.instrument = instrument
        self.open_error = open_error
        self.opened = []
        self.closed = False

    def open_resource(self, resource, **kwargs):
        self.opened.append((resource, kwargs))
        if self.open_error is not None:
            raise self.open_error
        return self.instrument

    def close(self):
        self.closed = True


@pytest.fixture
def fake_visa(monkeypatch):
    """
    Route every transport connection to a FakeResourceManager.

    Call the fixture with the instruments (or open error) to use; each new
    connection gets the next instrument. The created resource managers are
    returned for assertions.
    """
    managers = []

    def install(*instruments, open_error=None):
        queue = list(instruments)

        def factory():
            instrument = queue.pop(0) if queue else None
            rm = FakeResourceManager(instrument, open_error)
            managers.append(rm)
            return rm

        monkeypatch.setattr(transport, "open_resource_manager", factory)
        return managers

    return install


@pytest.fixture
def no_visa(monkeypatch):
    """Fail the test if anything tries to reach an instrument."""

    def forbidden():
        raise AssertionError("transport must not be used")

    monkeypatch.setattr(transport, "open_resource_manager", forbidden)


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr("screenshot_capture.plugins.base.time.sleep", lambda seconds: None)


def make_image(fmt="PNG", size=(48, 32)):
    rng = random.Random(0)
    pixels = rng.randbytes(size[0] * size[1] * 3)
    img = Image.frombytes("RGB", size, pixels)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def ieee_block(data):
    length = str(len(data)).encode()
    return b"#" + str(len(length)).encode() + length + data + b"\n"


@pytest.fixture
def png_bytes():
    return make_image("PNG")


@pytest.fixture
def bmp_bytes():
    return make_image("BMP")


class FakeHandler(ScreenshotHandler):
    def __init__(self, data=b"\x89PNG" + b"\0" * 200, image_format="png", error=None):
        self.data = data
        self.image_format = image_format
        self.error = error
        self.calls = []

    def capture(self, address, timeout):
        self.calls.append((address, timeout))
        if self.error is not None:
            raise self.error
        return Screenshot(self.data, self.image_format)


def fake_plugin(name, patterns=None, description=None, handler=None):
    return ScreenshotPlugin(
        name=name,
        description=description or f"{name} test instrument",
        patterns=patterns,
        handler=handler or FakeHandler(),
    )
