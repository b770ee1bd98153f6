"""Example: a Script Filter that lists files matching the query.

Wire it into an Alfred workflow as a script filter running
``python3 file_search_example.py "{query}"``.
"""

from __future__ import annotations

import sys
from pathlib import Path

from alfred_workflows import Workflow


def main() -> None:
    query = sys.argv[1] if len(sys.argv) > 1 else ""
    workflow = Workflow()
    for path in sorted(Path.home().glob(f"*{query}*"))[:20]:
        full = str(path)
        (
            workflow.item()
            .uid(full)
            .title(path.name)
            .subtitle(full)
            .arg(full)
            .type("file", verify_existence=False)
            .icon_from_file(full)
            .quicklookurl(full)
            .copy(full)
            .cmd("Reveal in Finder", full)
            .alt("Open parent folder", str(path.parent))
        )
    if not len(workflow):
        workflow.item().title(f"No files matching '{query}'").valid(False)
    workflow.output()


if __name__ == "__main__":
    main()
