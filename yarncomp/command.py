"""yarncomp command line entry point.

Register it for yarn with `complete -C yarncomp yarn`: bash then runs it with
COMP_LINE and COMP_POINT set and reads one completion per output line.
"""

import os
import sys

from .commands.parsing import join_path
from .completions.engine import Completer
from .constants import COMP_LINE_VAR, COMP_POINT_VAR, CONFIG_ENV_VAR, LOG_ENV_VAR
from .logging_setup import get_logger, init_logger
from .models import CompletionError, ExitCode
from .settings import Settings, load_settings
from .validate_cli import run_validate

__all__ = ["main", "run_completion"]

USAGE = """Syntax: yarncomp [--debug <logfile>] [--config <file>] <command> [args]

Bash completion for yarn. Enable it with:

    complete -C yarncomp yarn

Commands:
 complete <line> [point]  Print the completions of <line>, cursor at [point] (end of line by default)
 commands                 List known yarn commands and their options
 validate                 Check the configuration file
 help                     Show this help
"""


def use_param(txt: str, args: list[str]) -> str:
    """Check if parameter `txt` is in `args`.

    if found, removes it from `args` & returns the argument value

    Raises:
        CompletionError: if the parameter has no value
    """
    v = ""
    if txt in args:
        i = args.index(txt)
        if i + 1 >= len(args):
            msg = f"Missing value for {txt}"
            raise CompletionError(msg)
        v = args[i + 1]
        del args[i : i + 2]
    return v


def _get_settings(config_filename: str) -> Settings:
    """Load settings, falling back to the defaults on any config problem."""
    try:
        return load_settings(config_filename)
    except CompletionError:
        get_logger("startup").warning("Configuration ignored, using defaults")
        return Settings()


def _cursor_offset(full_line: str, point: str | None) -> int:
    """Parse the cursor position, end of line when missing or invalid."""
    try:
        return int(point) if point is not None else len(full_line)
    except ValueError:
        return len(full_line)


def run_completion(full_line: str, cursor_offset: int, config_filename: str = "") -> ExitCode:
    """Print the completions for `full_line`.

    Never fails: any problem is logged and results in no completion at all.
    Output is written in one go, once every line is known.
    """
    log = get_logger("complete")
    log.debug("Completing %r at %d", full_line, cursor_offset)
    try:
        lines = Completer.from_settings(_get_settings(config_filename)).complete(full_line, cursor_offset)
    except CompletionError as e:
        log.critical("Completion failed: %s", e)
        return ExitCode.SUCCESS
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        return ExitCode.SUCCESS
    if lines:
        sys.stdout.write("\n".join(lines) + "\n")
        sys.stdout.flush()
    return ExitCode.SUCCESS


def _list_commands(config_filename: str) -> ExitCode:
    table = _get_settings(config_filename).table
    for path in table.paths():
        print(f"{join_path(path):30s} {' '.join(table.lookup(path) or ())}".rstrip())
    return ExitCode.SUCCESS


def _run_command(args: list[str], config_filename: str) -> ExitCode:
    """Dispatch a CLI command (anything but shell completion)."""
    command = args[0] if args else "help"
    if command in {"help", "--help", "-h"}:
        print(USAGE)
        return ExitCode.SUCCESS
    if command == "complete":
        if len(args) not in {2, 3}:
            print(USAGE, file=sys.stderr)
            return ExitCode.USAGE_ERROR
        full_line, *point = args[1:]
        return run_completion(full_line, _cursor_offset(full_line, point[0] if point else None), config_filename)
    if command == "commands":
        return _list_commands(config_filename)
    if command == "validate":
        return run_validate(config_filename)
    print(f"Unknown command: {command}\n", file=sys.stderr)
    print(USAGE, file=sys.stderr)
    return ExitCode.USAGE_ERROR


def main() -> None:
    """Run the command."""
    if COMP_LINE_VAR in os.environ:
        # Invoked by the shell: arguments are the words bash adds, only the environment matters
        log_file = os.environ.get(LOG_ENV_VAR)
        try:
            init_logger(filename=log_file or None, force_debug=bool(log_file), screen=False)
        except OSError:
            init_logger(screen=False)
        full_line = os.environ[COMP_LINE_VAR]
        cursor_offset = _cursor_offset(full_line, os.environ.get(COMP_POINT_VAR))
        sys.exit(run_completion(full_line, cursor_offset, os.environ.get(CONFIG_ENV_VAR, "")))

    args = sys.argv[1:]
    try:
        debug_flag = use_param("--debug", args)
        config_override = use_param("--config", args) or os.environ.get(CONFIG_ENV_VAR, "")
    except CompletionError as e:
        init_logger()
        get_logger("startup").critical("%s", e)
        sys.exit(ExitCode.USAGE_ERROR)

    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    sys.exit(_run_command(args, config_override))


if __name__ == "__main__":
    main()
