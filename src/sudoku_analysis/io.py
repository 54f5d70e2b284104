"""Save and load analysis results as JSON, converting numpy values on the way."""

import json
import os
from typing import Any

import numpy as np


def convert_results_for_json(results: dict) -> dict:
    """
    Convert analysis results to JSON-serializable format.
    Handles numpy types, tuple keys, etc.
    """
    return _make_serializable(results)


def _make_serializable(obj: Any) -> Any:
    """Recursively convert an object to be JSON-serializable."""
    if isinstance(obj, dict):
        new_dict = {}
        for k, v in obj.items():
            if isinstance(k, tuple):
                k = ",".join(str(part) for part in k)
            new_dict[str(k)] = _make_serializable(v)
        return new_dict
    elif isinstance(obj, (list, tuple)):
        return [_make_serializable(item) for item in obj]
    elif isinstance(obj, np.bool_):
        return bool(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


def save_results_json(results: dict, path: str) -> str:
    """Save results to JSON, creating the parent directory if needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    serializable = convert_results_for_json(results)
    with open(path, "w") as f:
        json.dump(serializable, f, indent=2, default=str)
    print(f"✓ Saved results to {path}")
    return path


def load_results_json(path: str) -> dict:
    with open(path, "r") as f:
        return json.load(f)
