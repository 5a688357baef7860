import os
from typing import Final, Mapping

ENV_DEBUG: Final = "HEXO_FM_DEBUG"

TRUTHY_ENV_VAR_VALUES: Final = {"1", "true", "x", "y", "yes"}

_debug_override: bool | None = None


def is_env_var_truthy(env: Mapping[str, str], var: str) -> bool:
    if v := env.get(var):
        return v.lower() in TRUTHY_ENV_VAR_VALUES
    return False


def is_debug(env: Mapping[str, str] | None = None) -> bool:
    if _debug_override is not None:
        return _debug_override
    return is_env_var_truthy(os.environ if env is None else env, ENV_DEBUG)


def set_debug(v: bool | None) -> None:
    """Force debug logging on or off, or pass ``None`` to defer to the
    environment again."""

    global _debug_override
    _debug_override = v
