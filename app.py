# app.py

import argparse
import sys
import time

from rich.console import Console

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, validate_config
from logger.logger import JSONLogger
from simulator.computation import Computation
from simulator.evaluator import summarize
from simulator.generator import make_rng, random_turing_machine

console = Console()

# === Driver ===
def run_machine(machine, max_steps, delay_ms=0, log_frequency=100, sleep=time.sleep):
    """Step a fresh computation of ``machine``, pausing ``delay_ms`` between steps."""
    run = Computation.start(machine)

    while run.steps < max_steps:
        if run.step():
            break
        if run.steps % log_frequency == 0:
            console.print(f"[cyan]Step {run.steps:,}: state {run.current_state}, head {run.tape_head_position}[/cyan]")
        if delay_ms:
            sleep(delay_ms / 1000)

    if run.is_halted:
        console.print("[bold green]Halted[/bold green]")
    else:
        console.print(f"[yellow]Stopped after {run.steps:,} steps without halting.[/yellow]")

    return summarize(run)

def apply_overrides(config, args):
    overrides = {
        "num_states": args.states,
        "delay_ms": args.delay,
        "max_steps": args.max_steps,
        "seed": args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = value
    return config

def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing machine simulator")
    parser.add_argument("--states", type=int, help="Number of states for the Turing machine")
    parser.add_argument("--delay", type=int, metavar="MILLISECONDS", help="Delay between Turing machine steps")
    parser.add_argument("--max-steps", type=int, help="Stop after this many steps if the machine has not halted")
    parser.add_argument("--seed", type=int, help="Seed for random machine generation")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime config JSON")
    parser.add_argument("--no-log", action="store_true", help="Do not write the JSON run log")
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config, verbose=False), args)
        validate_config(config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    rng = make_rng(config["seed"])
    machine = random_turing_machine(rng, config["num_states"])
    console.print(machine.describe(), markup=False)

    result = run_machine(
        machine,
        max_steps=config["max_steps"],
        delay_ms=config["delay_ms"],
        log_frequency=config["log_frequency"],
    )

    if not args.no_log:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        logger.log_result(result)
        console.print(f"[green]Result logged to {logger.current_log}[/green]")

    return 0

if __name__ == "__main__":
    sys.exit(main())
