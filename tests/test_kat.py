import io

import pytest

from mceliece.kat import format_bstr, generate, main

HEADER = "# kem/mceliece348864\n\n"


def test_format_bstr_upper_hex():
    assert format_bstr("seed = ", b"\x00\xab\x10") == "seed = 00AB10\n"


def test_format_bstr_empty_data():
    assert format_bstr("ss = ", b"") == "ss = 00\n"


def test_generate_without_vectors_writes_header_only():
    req = io.StringIO()
    rsp = io.StringIO()
    generate(0, req, rsp)
    assert req.getvalue() == ""
    assert rsp.getvalue() == HEADER


def test_main_writes_files(tmp_path):
    req = tmp_path / "kat.req"
    rsp = tmp_path / "kat.rsp"
    assert main([str(req), str(rsp), "--count", "0"]) == 0
    assert req.read_text() == ""
    assert rsp.read_text() == HEADER


def test_main_reports_unwritable_output(tmp_path):
    missing = tmp_path / "missing" / "kat.req"
    status = main([str(missing), str(tmp_path / "kat.rsp"), "--count", "0"])
    assert status == -1


def test_main_rejects_negative_count(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "a"), str(tmp_path / "b"), "--count", "-1"])
    assert excinfo.value.code == 2