"""
``sync-scripts`` - mirror tasks into ``package.json`` script aliases.

For a command ``CMD`` (default ``mkdo``) the manifest is brought to::

    "scripts": {
        "mkdo": "CMD",
        "<task>": "CMD <task>",
        ...
    }

Other script entries are left alone.  With ``--check`` nothing is written;
the task fails when the manifest is out of date, which suits CI.

Arguments (after the task name)::

    --package-json-file PATH   manifest path, relative to the working directory
    --mkdo CMD                 command used in the aliases
    --check                    verify only
"""

from __future__ import annotations

import argparse
import json
import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn

from mkdo.core.errors import ConfigError
from mkdo.core.logging import get_logger
from mkdo.core.models import TaskMap, sorted_tasks
from mkdo.execution.context import RuntimeContext

logger = get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(f"sync-scripts: {message}")


@dataclass(frozen=True)
class SyncOptions:
    package_json_file: Path = Path("package.json")
    mkdo: str = "mkdo"
    check: bool = False


def parse_sync_args(args: Sequence[str]) -> SyncOptions:
    """Parse the trailing arguments of ``mkdo sync-scripts``.

    Raises:
        ConfigError: On unknown or malformed arguments.
    """
    parser = _ArgumentParser(prog="mkdo sync-scripts", add_help=False)
    parser.add_argument("--package-json-file", type=Path, default=Path("package.json"))
    parser.add_argument("--mkdo", default="mkdo")
    parser.add_argument("--check", action="store_true")
    parsed = parser.parse_args(list(args))
    return SyncOptions(
        package_json_file=parsed.package_json_file,
        mkdo=parsed.mkdo,
        check=parsed.check,
    )


def update_scripts(manifest: dict[str, Any], task_map: TaskMap, mkdo: str) -> bool:
    """Bring ``manifest["scripts"]`` up to date in place.

    Returns:
        True if anything changed.
    """
    changed = False
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
        manifest["scripts"] = scripts
        changed = True

    if scripts.get("mkdo") != mkdo:
        scripts["mkdo"] = mkdo
        changed = True

    for task in sorted_tasks(task_map):
        command = f"{mkdo} {shlex.quote(task.name)}"
        if scripts.get(task.name) != command:
            scripts[task.name] = command
            changed = True

    return changed


def sync_scripts(task_map: TaskMap, ctx: RuntimeContext) -> int:
    """Built-in task: write (or with ``--check`` verify) the script aliases."""
    options = parse_sync_args(ctx.args)
    path = ctx.cwd / options.package_json_file

    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot load '{path}': {e}", context={"path": str(path)}, cause=e) from e
    if not isinstance(manifest, dict):
        raise ConfigError(f"'{path}' must contain a JSON object", context={"path": str(path)})

    changed = update_scripts(manifest, task_map, options.mkdo)
    logger.debug("sync_scripts.compared", path=str(path), changed=changed, check=options.check)

    if options.check:
        if changed:
            ctx.error(f"needs to update {options.package_json_file.name}")
            return 1
        return 0

    if changed:
        ctx.log(f"updates {options.package_json_file.name}")
        path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return 0


__all__ = ["SyncOptions", "parse_sync_args", "sync_scripts", "update_scripts"]
