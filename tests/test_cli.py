import logging

import matplotlib.pyplot as plt
import pytest

from dissociation.cli import main


def test_cli_writes_figure_bundle(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    open_figures = plt.get_fignums()

    status = main(["2.1", "7.2", "12.6", "--outdir", str(tmp_path)])

    assert status == 0
    for ext in ("png", "pdf", "svg"):
        assert (tmp_path / f"Triprotic_acid.{ext}").exists()
    assert "Triprotic acid: 3 pKa values, C = 0.1 M" in caplog.text
    assert "amphiprotic_1" in caplog.text
    assert plt.get_fignums() == open_figures


def test_cli_custom_title_and_concentration(tmp_path, caplog):
    caplog.set_level(logging.INFO)

    main(["4.76", "-c", "0.01", "--title", "Acetic acid", "--outdir", str(tmp_path)])

    assert (tmp_path / "Acetic_acid.png").exists()
    assert "C = 0.01 M" in caplog.text


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "2", "3", "4", "5"],
        ["0"],
        ["4.76", "-c", "0"],
        ["4.76", "-c", "nan"],
    ],
)
def test_cli_rejects_invalid_arguments(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err
