"""CLI dispatcher — lazy-loads command modules on demand."""
from __future__ import annotations


def dispatch_command(args) -> int:
    """Route args.cmd to the appropriate cli module, importing only on use.

    Returns the process exit code.
    """
    cmd = getattr(args, "cmd", None)
    json_output = getattr(args, "json", False)

    if cmd == "get":
        from cli.env_cmd import cmd_get
        return cmd_get(args, args.key, json_output=json_output)

    elif cmd == "list":
        from cli.env_cmd import cmd_list
        return cmd_list(args, fmt=args.format)

    elif cmd == "check":
        from cli.env_cmd import cmd_check
        return cmd_check(args, json_output=json_output)

    elif cmd == "run":
        from cli.run_cmd import cmd_run
        return cmd_run(args, args.command)

    elif cmd == "version":
        from cli.version_cmd import cmd_version
        return cmd_version(json_output=json_output)

    from cli.helpers import print_error
    print_error(f"Unknown command: {cmd}")
    return 2
