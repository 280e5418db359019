from simulator.computation import Computation


def summarize(run):
    """Build a result entry for the JSON logger from a computation's current state."""
    machine = run.turing_machine
    try:
        compact = machine.to_compact()
    except ValueError:
        compact = None  # More than 26 states has no compact form

    return {
        "machine": compact,
        "rules": machine.serialize(),
        "steps_taken": run.steps,
        "halted": run.is_halted,
        "ones": run.tape.count_ones(),
        "head": run.tape_head_position,
        "state": run.current_state.index,
    }


def evaluate_machine(machine, max_steps=10000):
    """
    Run a fresh computation of ``machine`` for at most ``max_steps`` steps.
    Returns a result entry ready for the JSON logger.
    """
    run = Computation.start(machine)
    run.run(max_steps)
    return summarize(run)


def evaluate_batch(machines, max_steps=10000):
    """Evaluate each machine independently; machines may repeat since runs never mutate them."""
    return [evaluate_machine(machine, max_steps=max_steps) for machine in machines]
