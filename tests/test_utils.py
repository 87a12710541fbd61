import psutil

from utils import utils


def test_ram_info_reports_totals():
    assert utils.get_ram_info().startswith("Total: ")


def test_ram_info_reports_errors(monkeypatch):
    def broken():
        raise RuntimeError("no meminfo")

    monkeypatch.setattr(psutil, "virtual_memory", broken)
    assert utils.get_ram_info() == "Error: no meminfo"


def test_write_system_info(tmp_path):
    path = utils.write_system_info(str(tmp_path))
    with open(path) as f:
        content = f.read()
    assert content.startswith("[System Info]\n")
    assert "RAM: " in content
