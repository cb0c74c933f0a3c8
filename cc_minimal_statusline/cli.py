"""Click-based CLI entrypoint for cc-minimal-statusline.

Commands are implemented as Click subcommands with lazy loading.
Unknown commands raise an error.
"""

from __future__ import annotations

import importlib
import sys

import click

from cc_minimal_statusline import __version__
from cc_minimal_statusline.utils import log_debug, set_debug

# ---------------------------------------------------------------------------
# Aliases
# ---------------------------------------------------------------------------
# Each alias maps to (canonical_command, prepended_args).  The CLI rewrites
# the invocation before dispatch.  ``postinstall`` is what packaging hooks
# call: it must never block on a prompt.

ALIASES: dict[str, tuple[str, list[str]]] = {
    "postinstall": ("install", ["--mode", "auto"]),
}

# ---------------------------------------------------------------------------
# Custom Click Group
# ---------------------------------------------------------------------------


_LAZY_COMMANDS: dict[str, tuple[str, str]] = {
    "install": ("cc_minimal_statusline.commands.install", "install"),
    "show": ("cc_minimal_statusline.commands.show", "show"),
    "uninstall": ("cc_minimal_statusline.commands.uninstall", "uninstall"),
}


class StatuslineGroup(click.Group):
    """Custom Click group that supports alias resolution and lazy loading.

    Behaviour:
    * Command modules are imported on first access, not at import time.
    * Aliases listed in ``ALIASES`` are rewritten to their canonical form
      before dispatch.
    * Unknown commands produce an error message.
    """

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return all available command names (eager + lazy)."""
        eager = set(self.commands or {})
        return sorted(eager | _LAZY_COMMANDS.keys())

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Look up a command, importing lazily if needed."""
        cmd = self.commands.get(cmd_name)
        if cmd is not None:
            return cmd

        entry = _LAZY_COMMANDS.get(cmd_name)
        if entry is None:
            return None

        module_path, attr_name = entry
        mod = importlib.import_module(module_path)
        loaded_cmd: click.Command = getattr(mod, attr_name)
        # Cache so subsequent lookups skip the import
        self.add_command(loaded_cmd, cmd_name)
        return loaded_cmd

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Resolve a command name, handling aliases.

        Order of operations:
        1. If the token is an alias, rewrite to canonical name + prepend args.
        2. Try normal Click resolution (registered subcommands).
        3. If not found, raise an error.
        """
        if not args:
            return super().resolve_command(ctx, args)

        cmd_name = args[0]
        remaining = list(args[1:])

        if cmd_name in ALIASES:
            canonical, prepended = ALIASES[cmd_name]
            log_debug(f"Alias '{cmd_name}' -> '{canonical}' with args {prepended}")
            cmd_name = canonical
            remaining = prepended + remaining

        cmd_obj = self.get_command(ctx, cmd_name)
        if cmd_obj is not None:
            return cmd_name, cmd_obj, remaining

        ctx.fail(
            f"Unknown command '{cmd_name}'. Run 'cc-minimal-statusline-setup --help' "
            f"for available commands."
        )


# ---------------------------------------------------------------------------
# Main CLI Group
# ---------------------------------------------------------------------------


@click.group(
    cls=StatuslineGroup,
    invoke_without_command=True,
)
@click.option("--debug", is_flag=True, help="Print debug messages to stderr")
@click.version_option(__version__, prog_name="cc-minimal-statusline")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Configure the cc-minimal-statusline status line for Claude Code."""
    set_debug(debug)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the CLI.

    Uses ``standalone_mode=False`` so that exit codes are handled here.
    Usage errors (bad flags, invalid ``--command``) exit with 1 rather
    than Click's default of 2.  Filesystem errors are not caught: they
    surface with a traceback and a non-zero exit status.
    """
    try:
        cli(standalone_mode=False)
    except click.UsageError as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        sys.exit(1 if code == 2 else code)


if __name__ == "__main__":
    main()
