from tqdm.auto import tqdm


def expected_steps(logic):
    """
    Number of steps left before the machine finishes, counted from its
    current state. The last bean to land is the last one dropped, which needs
    slot_count - 1 steps from the top.
    """
    n_remaining = logic.get_remaining_bean_count()
    n_in_flight = logic.get_in_flight_bean_count()
    slot_count = logic.get_slot_count()

    if slot_count == 1:
        return n_remaining + n_in_flight
    if n_remaining > 0:
        return n_remaining + slot_count - 1
    if n_in_flight > 0:
        return slot_count - 1 - logic.step_padding
    return 0


def run_machine(logic, debug=False, progress=False):
    """
    Advances the machine until it is finished and returns the number of steps
    taken. With debug the machine is printed after every step.
    """
    n_steps = 0
    with tqdm(total=expected_steps(logic), disable=not progress) as pbar:
        while logic.advance_step():
            n_steps += 1
            pbar.update(1)
            if debug:
                print(logic)
    return n_steps
