import numpy as np
import matplotlib.pyplot as plt


def plot_slots(logic, ax=None, filename=None, color="blue", alpha=0.7):
    """
    Bar chart of the beans in every slot, with the average slot as a dashed
    line. Saves the figure when a filename is given.
    """
    if ax is None:
        _, ax = plt.subplots()

    slots = logic.get_slot_counts()
    ax.bar(np.arange(len(slots)), slots, color=color, alpha=alpha)
    if logic.get_in_slot_bean_count() > 0:
        ax.axvline(logic.get_average_slot_bean_count(), color="black", linestyle="--")
    ax.set_xlabel("Slot")
    ax.set_ylabel("Number of Beans")
    ax.grid(True)

    if filename is not None:
        ax.figure.savefig(filename)
    return ax
