import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "runtime_config.json")

DEFAULT_CONFIG = {
    "num_states": 30,
    "delay_ms": 1000,
    "max_steps": 1_000_000,
    "seed": None,
    "log_frequency": 100,
    "output_directory": "logs/",
    "log_file_prefix": "turing_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "num_states": int,
    "delay_ms": int,
    "max_steps": int,
    "seed": (int, type(None)),
    "log_frequency": int,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is an int subclass; reject it for numeric keys
        if isinstance(value, bool) or not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["num_states"] < 1:
        raise ValueError("num_states must be at least 1.")
    if config["delay_ms"] < 0:
        raise ValueError("delay_ms must be non-negative.")
    if config["max_steps"] < 0:
        raise ValueError("max_steps must be non-negative.")
    if config["seed"] is not None and config["seed"] < 0:
        raise ValueError("seed must be non-negative.")
    if config["log_frequency"] < 1:
        raise ValueError("log_frequency must be at least 1.")

def load_config(path=DEFAULT_CONFIG_PATH, verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
