from __future__ import annotations
import os

# Defaults
_DEFAULT_LAMBDA_PREFIX = 'lambda-'
_TRUTHY = {'1', 'true', 'yes', 'on'}


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_lambda_prefix() -> str:
    """Prefix used when naming anonymous lambdas."""
    return str_from_env('STEPL_LAMBDA_PREFIX', _DEFAULT_LAMBDA_PREFIX)


def trace_enabled() -> bool:
    return flag_from_env('STEPL_TRACE')
