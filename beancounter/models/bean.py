import numpy as np

LEFT = 0
RIGHT = 1

# sets the mean and spread of the skill level draw, skill beans themselves
# choose deterministically
SKILL_PROB = 0.5


def round_half_up(x):
    """
    Rounds to the nearest integer with .5 going up, so -2.5 -> -2 and 2.5 -> 3.
    The builtin round() sends halves to the even neighbour instead.
    """
    return int(np.floor(x + 0.5))


class Bean:
    """
    A bean falling through the machine. Subclasses decide which way it goes
    at each peg.
    """

    def __init__(self, slot_count, rng=None):
        self.slot_count = slot_count
        self.rng = np.random.default_rng() if rng is None else rng

    def choose(self):
        raise NotImplementedError

    def restart(self):
        pass


class LuckBean(Bean):
    """
    Goes left or right with a 50/50 chance at every peg.
    """

    def choose(self):
        if self.rng.integers(2) == 0:
            return LEFT
        return RIGHT

    def __repr__(self):
        return "LuckBean(slot_count={})".format(self.slot_count)


class SkillBean(Bean):
    """
    Goes right `skill` times, then always left. A skill of 9 on a 10 slot
    machine always ends up in slot 9 and a skill of 0 always in slot 0.
    For a skill of 7 the bean goes right 7 times and then left twice.
    """

    def __init__(self, slot_count, skill, rng=None):
        super().__init__(slot_count, rng=rng)
        self.init_skill = skill
        self.curr_skill = skill

    def choose(self):
        if self.curr_skill > 0:
            self.curr_skill -= 1
            return RIGHT
        return LEFT

    def restart(self):
        self.curr_skill = self.init_skill

    def __repr__(self):
        return "SkillBean(slot_count={}, skill={})".format(
            self.slot_count, self.init_skill
        )


def draw_skill(slot_count, rng):
    """
    Skill level drawn from a normal distribution centred on the middle slot,
    with the spread of a binomial over `slot_count` fair steps. Draws outside
    [0, slot_count] are kept and act as always-left / always-right.
    """
    skill_avg = slot_count * SKILL_PROB
    skill_stdev = np.sqrt(slot_count * SKILL_PROB * (1.0 - SKILL_PROB))
    return round_half_up(rng.normal(skill_avg, skill_stdev))


def create_bean(slot_count, is_luck, rng=None):
    """
    slot_count: int
        Number of slots of the machine the bean is meant for
    is_luck: bool
        Luck mode (coin flip at every peg) or skill mode
    rng: np.random.Generator
        Shared generator; pass a seeded one for repeatable runs
    """
    if rng is None:
        rng = np.random.default_rng()

    if is_luck:
        return LuckBean(slot_count, rng=rng)
    return SkillBean(slot_count, draw_skill(slot_count, rng), rng=rng)
