import pytest

from screenshot_capture import __version__
from screenshot_capture.cli import main

from .conftest import FakeInstrument, ieee_block


def test_list_does_not_contact_instrument(no_visa, capsys):
    assert main(["--list"]) == 0

    out = capsys.readouterr().out
    assert "Name   Description" in out
    assert "rigol-1000z   Rigol DS/MSO 1000Z series oscilloscope" in out


def test_missing_address(no_visa, capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error: Missing address\n"


def test_unknown_plugin(no_visa, capsys):
    assert main(["-a", "10.0.0.2", "-p", "zzz"]) == 1
    assert "Unknown plugin name" in capsys.readouterr().err


def test_autodetect_and_save(fake_visa, tmp_path, png_bytes, capsys):
    identity = FakeInstrument([b"RIGOL TECHNOLOGIES,DS1054Z,DS1ZA1,00.04.04\n"])
    image = FakeInstrument([ieee_block(png_bytes)])
    # one connection for *IDN?, one for the screen dump
    managers = fake_visa(identity, image)
    target = tmp_path / "out.png"

    assert main(["-a", "10.0.0.2", "-t", "2", str(target)]) == 0

    out = capsys.readouterr().out
    assert "Loaded rigol-1000z screenshot plugin" in out
    assert f"Saved screenshot image to {target}" in out
    assert target.read_bytes() == png_bytes
    assert identity.written == ["*IDN?"]
    assert image.written == [":DISPlay:DATA? ON,0,PNG"]
    assert image.timeout == 2000
    assert len(managers) == 2
    assert all(rm.closed for rm in managers)


def test_explicit_plugin_skips_identity(fake_visa, tmp_path, bmp_bytes, capsys):
    image = FakeInstrument([bmp_bytes])
    managers = fake_visa(image)
    target = tmp_path / "dmm.bmp"

    assert main(["-a", "10.0.0.3", "-p", "siglent-sdm3000", str(target)]) == 0

    assert image.written == ["scdp"]
    assert len(managers) == 1
    assert target.read_bytes() == bmp_bytes
    assert "Loaded" not in capsys.readouterr().out



def test_autodetect_failure(fake_visa, capsys):
    fake_visa(FakeInstrument([b"ACME,WIDGET,1,1.0\n"]))

    assert main(["-a", "10.0.0.2"]) == 1
    assert "specify plugin name manually" in capsys.readouterr().err


def test_connect_failure(fake_visa, capsys):
    from pyvisa.constants import StatusCode
    from pyvisa.errors import VisaIOError

    fake_visa(open_error=VisaIOError(StatusCode.error_resource_not_found))

    assert main(["-a", "10.0.0.2"]) == 1
    assert "Unable to retrieve instrument ID" in capsys.readouterr().err


def test_negative_timeout_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-a", "10.0.0.2", "-t", "-1"])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_image_receive_failure(fake_visa, capsys):
    from pyvisa.constants import StatusCode
    from pyvisa.errors import VisaIOError

    image = FakeInstrument(read_error=VisaIOError(StatusCode.error_timeout))
    managers = fake_visa(image)

    assert main(["-a", "10.0.0.2", "-p", "rigol-2000"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Failed to receive message")
    assert image.closed and managers[0].closed


def test_file_write_failure(fake_visa, tmp_path, bmp_bytes, capsys):
    fake_visa(FakeInstrument([bmp_bytes]))

    assert main(["-a", "10.0.0.3", "-p", "siglent-sdm3000", str(tmp_path)]) == 1
    assert capsys.readouterr().err.startswith("Error: Could not write screenshot file")
