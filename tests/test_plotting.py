import matplotlib.pyplot as plt

from beancounter.models.bean import SkillBean
from beancounter.models.board import BeanCounter
from beancounter.utils.plotting import plot_slots
from beancounter.utils.simulate import run_machine


def test_plot_slots(tmp_path):
    logic = BeanCounter(3)
    logic.reset([SkillBean(3, skill) for skill in (0, 1, 1, 2)])
    run_machine(logic)

    filename = tmp_path / "slots.png"
    ax = plot_slots(logic, filename=filename)

    assert filename.exists()
    assert [patch.get_height() for patch in ax.patches] == [1, 2, 1]
    assert ax.get_xlabel() == "Slot"
    assert len(ax.lines) == 1
    plt.close(ax.figure)


def test_plot_slots_empty_machine():
    logic = BeanCounter(4)
    logic.reset([])

    fig, ax = plt.subplots()
    assert plot_slots(logic, ax=ax) is ax
    assert len(ax.patches) == 4
    assert len(ax.lines) == 0
    plt.close(fig)
