import io

import pytest

from paramscan import __version__
from paramscan.__main__ import main


def test_main_prints_merged_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["cat=1&bar[one][two]=2&bar[one][red]=112"]) == 0
    assert capsys.readouterr().out == '{"cat":1,"bar":{"one":{"two":2,"red":112}}}\n'


def test_main_reads_stdin_and_pretty_prints(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("items[]=1&items[]=2\n"))
    assert main(["--pretty"]) == 0
    assert capsys.readouterr().out == '{\n  "items": [\n    1,\n    2\n  ]\n}\n'


def test_main_reports_malformed_keys(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a[b=1"]) == 2
    assert "malformed bracket key: `a[b`" in capsys.readouterr().err


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        _ = main(["--version"])
    assert __version__ in capsys.readouterr().out
