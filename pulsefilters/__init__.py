"""Streaming filters, pole/zero transforms, zero-crossing detectors and log readers for pulse signals."""

__version__ = "0.1.0"

__all__ = [
    "biquad",
    "complex_types",
    "hrm_log",
    "iir",
    "layout",
    "pole_transforms",
    "state",
    "zero_crossing",
]