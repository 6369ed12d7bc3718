# tasks.py
"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv resolve --name "Lunch with friends"
  inv resolve --records data/categories.json --json
  inv test
"""

from invoke import task
import shlex
import sys


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


@task(
    help={
        "name": "Category name to resolve (repeatable)",
        "records": "FileMaker _find response JSON with category records",
        "tables": "Display tables YAML overriding the built-ins",
        "json": "Print a JSON object instead of text",
    },
    iterable=["name"],
)
def resolve(c, name=None, records=None, tables=None, json=False):
    """Resolve display icon/color for category names or FileMaker records."""
    if not name and not records:
        raise SystemExit("Provide --name <category> or --records <file>")

    args = ["-m", "ww_cli.display", *[shlex.quote(n) for n in name or []]]
    if records:
        args += ["--records", shlex.quote(records)]
    if tables:
        args += ["--tables", shlex.quote(tables)]
    if json:
        args.append("--json")
    c.run(f'"{_python()}" ' + " ".join(args), pty=False)


@task
def test(c):
    """Run unit tests with pytest."""
    c.run(f'"{_python()}" -m pytest -q', pty=False)
