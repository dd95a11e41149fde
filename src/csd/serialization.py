"""
Serialization helpers for CSD analysis reports.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from csd.analyzer import CsdReport


def report_to_dict(r: CsdReport) -> Dict[str, Any]:
    return {
        "csd": r.csd,
        "value": r.value,
        "length": r.length,
        "integral_digits": r.integral_digits,
        "fractional_digits": r.fractional_digits,
        "nonzero_digits": r.nonzero_digits,
        "highest_power": r.highest_power,
        "is_canonical": r.is_canonical,
        "repeated_pattern": r.repeated_pattern,
        "warnings": list(r.warnings),
    }


def report_from_dict(d: Dict[str, Any]) -> CsdReport:
    return CsdReport(
        csd=d["csd"],
        value=float(d.get("value", 0.0)),
        length=d.get("length", 0),
        integral_digits=d.get("integral_digits", 0),
        fractional_digits=d.get("fractional_digits", 0),
        nonzero_digits=d.get("nonzero_digits", 0),
        highest_power=d.get("highest_power"),
        is_canonical=d.get("is_canonical", True),
        repeated_pattern=d.get("repeated_pattern", ""),
        warnings=list(d.get("warnings", [])),
    )


def report_to_json(r: CsdReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_from_json(s: str) -> CsdReport:
    d = json.loads(s)
    return report_from_dict(d)


def report_to_yaml(r: CsdReport) -> str:
    return yaml.safe_dump(report_to_dict(r))


def report_from_yaml(s: str) -> CsdReport:
    d = yaml.safe_load(s)
    return report_from_dict(d)
