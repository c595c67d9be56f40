import pytest

from beancounter.main import main


def test_main_no_beans(capsys):
    assert main(["3", "0", "luck"]) == 0
    out = capsys.readouterr().out
    assert out == "Slot bean counts:\n   0   0   0\n"


def test_main_skill_run(capsys):
    assert main(["5", "20", "skill", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Slot bean counts:"
    assert sum(int(count) for count in lines[1].split()) == 20


def test_main_seed_is_reproducible(capsys):
    main(["6", "50", "luck", "--seed", "9"])
    first = capsys.readouterr().out
    main(["6", "50", "luck", "--seed", "9"])
    assert capsys.readouterr().out == first


def test_main_debug_prints_machine(capsys):
    assert main(["2", "1", "skill", "debug", "--seed", "0"]) == 0
    out = capsys.readouterr().out
    # the machine right after reset, then after the one step
    assert out.startswith("     1\n   0   0\n   0   0\n")
    assert out.count("Slot bean counts:") == 1


def test_main_plot(tmp_path, capsys):
    filename = tmp_path / "hist.png"
    assert main(["4", "10", "luck", "--seed", "1", "--plot", str(filename)]) == 0
    assert filename.exists()


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["3", "2"],
        ["abc", "2", "luck"],
        ["3", "2.5", "luck"],
        ["3", "-1", "luck"],
        ["0", "2", "luck"],
        ["3", "2", "magic"],
        ["3", "2", "luck", "verbose"],
        ["3", "2", "luck", "debug", "extra"],
    ],
)
def test_main_bad_arguments(argv, capsys):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: beancounter slot_count bean_count")
    assert "Slot bean counts:" not in out


@pytest.mark.parametrize(
    "argv",
    [
        ["3", "2", "luck", "--seed", "1", "debug"],
        ["--seed", "1", "3", "2", "luck", "debug"],
        ["3", "--progress", "2", "skill"],
    ],
)
def test_main_options_between_positionals(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Usage:" not in out
    assert "Slot bean counts:" in out


def test_main_debug_after_option_prints_machine(capsys):
    assert main(["2", "1", "skill", "--seed", "0", "debug"]) == 0
    assert capsys.readouterr().out.startswith("     1\n   0   0\n   0   0\n")


def test_usage_lists_options(capsys):
    main(["3"])
    first = capsys.readouterr().out.splitlines()[0]
    for option in ("--seed N", "--progress", "--plot FILE"):
        assert option in first
