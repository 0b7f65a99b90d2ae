import pytest
from motionpath import config as cfg
from motionpath.cli import run


def test_processes_program(sample_program, capsys):
    assert run.main([sample_program]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "LIN (0.00, 0.00, 0.00) -> (3.00, 4.00, 0.00)"
    assert out[5] == "3.00, 4.00, 0.00"
    assert out[6].startswith("CW center=(0.00, 0.00) r=5.00 stop=90.00deg")
    assert out[7] == "5.00, 0.00"
    assert "0.00, 5.00" in out


@pytest.mark.parametrize("argv", [[], ["a.cmmd", "b.cmmd"]])
def test_wrong_arity_prints_usage(argv, capsys):
    assert run.main(argv) == 0
    assert capsys.readouterr().out.startswith("Usage: motionpath <filename.cmmd>")


def test_wrong_extension_is_not_processed(write_program, capsys):
    path = write_program("LIN X1 Y1 Z1\n", name="program.txt")
    assert run.main([path]) == 0
    out = capsys.readouterr().out
    assert "must have a .cmmd extension" in out
    assert "LIN" not in out


def test_unreadable_file_exits_with_error(tmp_path, capsys):
    assert run.main([str(tmp_path / "missing.cmmd")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_precision_and_linear_mode_options(write_program, capsys):
    path = write_program("LIN X1 Y0 Z0\n")
    assert run.main(["--precision", "3", "--linear-mode", "fixed", path]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1 + 101
    assert out[-1] == "1.000, 0.000, 0.000"


@pytest.mark.parametrize(
    "argv,level",
    [
        (["-vvv"], 5),
        (["-vv"], 10),
        (["-v"], 20),
        (["-q"], 40),
        (["--log-level", "TRACE"], 5),
        (["--log-level", "ERROR"], 40),
    ],
)
def test_resolve_log_level(argv, level):
    args = run.build_parser().parse_args(argv)
    assert run.resolve_log_level(args) == level


def test_trace_env_selects_trace_level(monkeypatch):
    monkeypatch.setattr(cfg, "TRACE_ENABLED", True)
    assert run.resolve_log_level(run.build_parser().parse_args([])) == cfg.TRACE
    # Explicit flags still win
    assert run.resolve_log_level(run.build_parser().parse_args(["-q"])) == 40


def test_trace_flag_enables_token_tracing(monkeypatch, write_program):
    monkeypatch.setattr(cfg, "TRACE_ENABLED", False)
    assert run.main(["-vvv", write_program("LIN X1 Y1 Z1\n")]) == 0
    assert cfg.TRACE_ENABLED is True
