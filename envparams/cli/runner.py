from __future__ import annotations

import json
import shlex
import sys
from typing import Any, TextIO

from envparams import catalog
from envparams.accessor import ConfigParamAccessor, lookup
from envparams.config.env_loader import load_env_file
from envparams.errors import ConfigParamError
from envparams.params import ConfigParam
from envparams.services.environment.registry import resolve_source
from envparams.services.logger.factory import LOG_IMPL, LOG_LEVEL, LoggerFactory

USAGE = """\
Usage: python -m envparams <command> [global flags] [command args]

  Commands:
    print [NAME ...]                 Print parameters (default: the EPICS catalog)
    get NAME [--type T] [--size N]   Print one value; T is string, long, double or inet
             [--default VALUE]
    set NAME VALUE                   Set a parameter in the environment source, then print it
    defaults [--apply]               Print site defaults as shell exports; --apply sets them

  Global flags:
    --source      Environment source: process, snapshot, memory [default: process]
    --log         Logging format: pretty, memory, loki [default: pretty, or LOG_IMPL]
    --env         JSON string of env var overrides
    --env-file    Environment file name (loads .env/<name>.env)
"""

# Global flags and their defaults (None = resolved later)
_GLOBAL_FLAGS: dict[str, str | None] = {
    "source": "process",
    "log": None,
}

# command -> {option: takes_value}
_COMMAND_OPTIONS: dict[str, dict[str, bool]] = {
    "print": {},
    "get": {"type": True, "size": True, "default": True},
    "set": {},
    "defaults": {"apply": False},
}

_GET_TYPES = ("string", "long", "double", "inet")


def _parse_env_overrides(raw: str) -> dict[str, str]:
    """Parse a JSON string into env overrides. Validates types."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"--env value is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("--env value must be a JSON object")
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ValueError("--env JSON must have string keys and string values")
    return data


def _extract_global_flags(
    remaining: list[str],
) -> tuple[dict[str, str], dict[str, str], list[str]]:
    """Extract global flags from remaining args.

    Returns (impl_flags, env_overrides, filtered_args).
    """
    impl_flags: dict[str, str] = {
        k: v for k, v in _GLOBAL_FLAGS.items() if v is not None
    }
    env_overrides: dict[str, str] = {}
    env_file: str | None = None
    filtered_args: list[str] = []

    all_flag_names = set(_GLOBAL_FLAGS) | {"env", "env-file"}

    i = 0
    while i < len(remaining):
        flag = remaining[i]
        if flag.startswith("--") and flag[2:] in all_flag_names:
            if i + 1 >= len(remaining):
                raise ValueError(f"Missing value for {flag}")
            name = flag[2:]
            value = remaining[i + 1]
            if name == "env":
                env_overrides.update(_parse_env_overrides(value))
            elif name == "env-file":
                env_file = value
            else:
                impl_flags[name] = value
            i += 2
        else:
            filtered_args.append(flag)
            i += 1

    # File vars are lower priority; --env wins
    if env_file:
        merged = load_env_file(env_file)
        merged.update(env_overrides)
        env_overrides = merged

    return impl_flags, env_overrides, filtered_args


def _parse_command_args(
    command: str, raw_args: list[str]
) -> tuple[list[str], dict[str, str]]:
    """Split command args into positionals and ``--option`` values."""
    allowed = _COMMAND_OPTIONS[command]
    positionals: list[str] = []
    options: dict[str, str] = {}

    i = 0
    while i < len(raw_args):
        arg = raw_args[i]
        if arg.startswith("--"):
            key = arg[2:]
            if key not in allowed:
                raise ValueError(f"Unknown option for '{command}': {arg}")
            if allowed[key]:
                if i + 1 >= len(raw_args):
                    raise ValueError(f"Missing value for {arg}")
                options[key] = raw_args[i + 1]
                i += 2
            else:
                options[key] = "true"
                i += 1
        else:
            positionals.append(arg)
            i += 1
    return positionals, options


def _param_for(name: str, default: str | None = None) -> ConfigParam:
    """Catalog parameter for *name*, or an ad-hoc one without a default."""
    if default is not None:
        return ConfigParam(name, default)
    return catalog.find(name) or ConfigParam(name)


def build_accessor(
    impl_flags: dict[str, str],
    env_overrides: dict[str, str],
    stream: TextIO | None = None,
) -> ConfigParamAccessor:
    """Wire the environment source, logger and accessor together."""
    env = resolve_source(impl_flags.get("source", "process"), env_overrides)
    log_impl = impl_flags.get("log") or lookup(env, LOG_IMPL)
    factory = LoggerFactory(default_impl=log_impl, level=lookup(env, LOG_LEVEL), env=env)
    return ConfigParamAccessor(env, factory.create(), stream=stream)


def _cmd_print(accessor: ConfigParamAccessor, args: list[str], options: dict[str, str]) -> int:
    if args:
        accessor.print_params(_param_for(name) for name in args)
    else:
        accessor.print_params()
    return 0


def _cmd_get(accessor: ConfigParamAccessor, args: list[str], options: dict[str, str]) -> int:
    if len(args) != 1:
        raise ValueError("get takes exactly one parameter name")
    param = _param_for(args[0], options.get("default"))
    value_type = options.get("type", "string")
    out = accessor.out

    value: Any
    if value_type == "string":
        if "size" in options:
            try:
                size = int(options["size"])
            except ValueError as exc:
                raise ValueError(f"--size must be an integer, got '{options['size']}'") from exc
            value = accessor.require_string(param, size)
        else:
            value = accessor.require_string(param)
    elif value_type == "long":
        value = accessor.get_long(param)
    elif value_type == "double":
        value = accessor.get_double(param)
    elif value_type == "inet":
        value = accessor.get_inet_address(param)
    else:
        raise ValueError(
            f"Invalid value for --type: '{value_type}' (choices: {', '.join(_GET_TYPES)})"
        )
    print(value, file=out)
    return 0


def _cmd_set(accessor: ConfigParamAccessor, args: list[str], options: dict[str, str]) -> int:
    if len(args) != 2:
        raise ValueError("set takes a parameter name and a value")
    param = _param_for(args[0])
    accessor.set(param, args[1])
    accessor.print_param(param)
    return 0


def _cmd_defaults(accessor: ConfigParamAccessor, args: list[str], options: dict[str, str]) -> int:
    if args:
        raise ValueError("defaults takes no positional arguments")
    out = accessor.out
    for param, value in catalog.SITE_DEFAULTS:
        print(f"export {param.name}={shlex.quote(value)}", file=out)
    if "apply" in options:
        accessor.apply_site_defaults()
        accessor.print_params()
    return 0


_COMMANDS = {
    "print": _cmd_print,
    "get": _cmd_get,
    "set": _cmd_set,
    "defaults": _cmd_defaults,
}


def run_command(
    argv: list[str], stream: TextIO | None = None
) -> tuple[int, ConfigParamAccessor | None]:
    """Testable entry point: parses args, builds the accessor, runs the command.

    Returns (exit_code, accessor). Parameter errors raised by a command give
    exit code 1; usage errors raise ValueError, and an environment source that
    rejects its overrides raises EnvWriteError.
    """
    if not argv or argv[0] in ("--help", "-h", "help"):
        print(USAGE, file=stream or sys.stdout, end="")
        return (0, None)

    command, remaining = argv[0], argv[1:]
    handler = _COMMANDS.get(command)
    if handler is None:
        raise ValueError(
            f"Unknown command: '{command}' (available: {', '.join(_COMMANDS)})"
        )

    impl_flags, env_overrides, filtered_args = _extract_global_flags(remaining)
    args, options = _parse_command_args(command, filtered_args)
    accessor = build_accessor(impl_flags, env_overrides, stream=stream)

    try:
        exit_code = handler(accessor, args, options)
    except ConfigParamError as e:
        print(f"Error: {e}", file=sys.stderr)
        exit_code = 1
    return (exit_code, accessor)


def run_cli(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    try:
        exit_code, _ = run_command(args)
        sys.exit(exit_code)
    except (ConfigParamError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
