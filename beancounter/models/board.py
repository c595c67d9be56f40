import logging
from collections import deque

import numpy as np

from .bean import RIGHT, Bean

logger = logging.getLogger(__name__)

NO_BEAN_IN_YPOS = -1

# spaces between numbers when printing the machine, keep it odd
XSPACING = 3


class BeanCounter:
    """
    The bean counter, also known as a quincunx or Galton box. Beans are dropped
    from the top of a triangle of pegs and go left or right at every peg
    until they land in one of the slots at the bottom.

    In-flight beans are stored in a logical coordinate system with one bean
    per row at most. For a 4 slot machine:

                (0, 0)
            (0, 1) (1, 1)
        (0, 2) (1, 2) (2, 2)
    (0, 3) (1, 3) (2, 3) (3, 3)
    [Slot0] [Slot1] [Slot2] [Slot3]

    pos_map[y] holds the x coordinate of the bean at row y, or NO_BEAN_IN_YPOS.
    The occupied rows are always the block starting at step_padding, with the
    shallowest bean first in in_flight and the deepest last.
    """

    def __init__(self, slot_count, xspacing=XSPACING):
        if isinstance(slot_count, bool) or not isinstance(
            slot_count, (int, np.integer)
        ):
            raise ValueError(
                "slot_count must be an integer, got {!r}".format(slot_count)
            )
        if slot_count < 1:
            raise ValueError(
                "slot_count must be at least 1, got {}".format(slot_count)
            )
        self.slot_count = int(slot_count)
        self.xspacing = xspacing
        self._clear()

    def _clear(self):
        self.slots = np.zeros(self.slot_count, dtype=int)
        self.pos_map = np.full(self.slot_count, NO_BEAN_IN_YPOS, dtype=int)
        self.remaining = deque()
        self.in_flight = []
        self.in_slot = []
        self.step_padding = 0
        self.total_beans = 0

    def _check_index(self, i, name):
        if not 0 <= i < self.slot_count:
            raise IndexError(
                "{} {} out of range [0, {})".format(name, i, self.slot_count)
            )

    def _check_beans(self, beans):
        for bean in beans:
            if not isinstance(bean, Bean):
                raise TypeError("expected a Bean, got {!r}".format(bean))
            if bean.slot_count != self.slot_count:
                raise ValueError(
                    "bean built for {} slots cannot be used in a {} slot machine".format(
                        bean.slot_count, self.slot_count
                    )
                )

    # accessors

    def get_slot_count(self):
        return self.slot_count

    def get_remaining_bean_count(self):
        return len(self.remaining)

    def get_in_flight_bean_count(self):
        return len(self.in_flight)

    def get_in_slot_bean_count(self):
        return len(self.in_slot)

    def get_in_flight_bean_xpos(self, ypos):
        self._check_index(ypos, "row")
        return int(self.pos_map[ypos])

    def get_slot_bean_count(self, i):
        self._check_index(i, "slot")
        return int(self.slots[i])

    def get_slot_counts(self):
        """
        Read-only view of the slot counts.
        """
        view = self.slots.view()
        view.flags.writeable = False
        return view

    def get_average_slot_bean_count(self):
        """
        Average slot number of all the beans in slots, 0.0 if there are none.
        """
        if not self.in_slot:
            return 0.0
        return float(np.dot(np.arange(self.slot_count), self.slots) / len(self.in_slot))

    # setup

    def _drop_first(self):
        if self.remaining:
            self.pos_map[0] = 0
            self.in_flight.insert(0, self.remaining.popleft())

    def reset(self, beans):
        """
        Hard reset with the passed beans. The machine starts with one bean at
        the top. None entries are skipped.
        """
        beans = [bean for bean in beans if bean is not None]
        self._check_beans(beans)
        self._clear()

        for bean in beans:
            bean.restart()
            self.remaining.append(bean)
        self.total_beans = len(self.remaining)
        self._drop_first()
        logger.debug(
            "reset %d slot machine with %d beans", self.slot_count, self.total_beans
        )

    def repeat(self):
        """
        Scoops up the beans in the slots and the in-flight beans, adds them back
        to the remaining beans and starts over with one bean at the top.
        """
        beans = list(self.remaining) + self.in_slot + self.in_flight[::-1]
        self._clear()

        for bean in beans:
            bean.restart()
            self.remaining.append(bean)
        self.total_beans = len(self.remaining)
        self._drop_first()
        logger.debug("repeat with %d beans", self.total_beans)

    # simulation

    def advance_step(self):
        """
        Advances the machine one step. All the in-flight beans fall down one row,
        the bean in the last row lands in its slot and a new bean is dropped at
        the top if there are beans remaining.

        Returns whether anything changed. False means the machine is finished.
        """
        if not self.remaining and not self.in_flight:
            return False

        if self.slot_count == 1:
            self.slots[0] += 1
            self.in_slot.append(self.in_flight.pop())
            if self.remaining:
                self.in_flight.insert(0, self.remaining.popleft())
            else:
                self.pos_map[0] = NO_BEAN_IN_YPOS
            return True

        # deepest first so that every row is read before it is overwritten
        for i in range(len(self.in_flight) - 1, -1, -1):
            ypos = i + self.step_padding
            step = 1 if self.in_flight[i].choose() == RIGHT else 0
            self.pos_map[ypos + 1] = self.pos_map[ypos] + step

        last = self.slot_count - 1
        if self.pos_map[last] != NO_BEAN_IN_YPOS:
            slot = int(self.pos_map[last])
            # new bean goes after the beans already in its slot
            index = int(self.slots[:slot].sum()) + int(self.slots[slot])
            self.slots[slot] += 1
            self.in_slot.insert(index, self.in_flight.pop())
            self.pos_map[last] = NO_BEAN_IN_YPOS

        if self.remaining:
            self.pos_map[self.step_padding] = 0
            self.in_flight.insert(0, self.remaining.popleft())
        else:
            self.pos_map[self.step_padding] = NO_BEAN_IN_YPOS
            self.step_padding += 1

        return True

    # truncation

    def _half_target(self):
        # odd counts keep the bigger half: 3 beans -> 1 removed, 2 remaining
        return len(self.in_slot) // 2

    def _remove_from_slots(self, target, indices):
        for i in indices:
            if target == 0:
                break
            if self.slots[i] == 0:
                continue
            taken = min(int(self.slots[i]), target)
            self.slots[i] -= taken
            target -= taken

    def upper_half(self):
        """
        Removes the lower half of all beans currently in slots, keeping only the
        upper half. If there are an odd number of beans, (N-1)/2 beans are
        removed, so with 3 beans 1 is removed and 2 remain.
        """
        target = self._half_target()
        if target == 0:
            return
        del self.in_slot[:target]
        self._remove_from_slots(target, range(self.slot_count))
        self.total_beans -= target
        logger.debug("upper_half removed %d beans", target)

    def lower_half(self):
        """
        Removes the upper half of all beans currently in slots, keeping only the
        lower half. If there are an odd number of beans, (N-1)/2 beans are
        removed, so with 3 beans 1 is removed and 2 remain.
        """
        target = self._half_target()
        if target == 0:
            return
        del self.in_slot[len(self.in_slot) - target :]
        self._remove_from_slots(target, range(self.slot_count - 1, -1, -1))
        self.total_beans -= target
        logger.debug("lower_half removed %d beans", target)

    # printing

    def _indent(self, ypos):
        root_indent = (self.slot_count - 1) * (self.xspacing + 1) // 2 + (
            self.xspacing + 1
        )
        return root_indent - (self.xspacing + 1) // 2 * ypos

    def get_slot_string(self):
        """
        Bean count of every slot, each right aligned in xspacing + 1 columns.
        """
        width = self.xspacing + 1
        return "".join("{:>{}d}".format(int(count), width) for count in self.slots)

    def __str__(self):
        """
        The whole machine. A peg with a bean above it is a 1, otherwise 0, with
        the slot counts at the bottom.
        """
        lines = []
        for ypos in range(self.slot_count):
            xbean = self.pos_map[ypos]
            line = ""
            for xpos in range(ypos + 1):
                spacing = self._indent(ypos) if xpos == 0 else self.xspacing + 1
                line += "{:>{}d}".format(1 if xpos == xbean else 0, spacing)
            lines.append(line + "\n")
        return "".join(lines) + self.get_slot_string()
