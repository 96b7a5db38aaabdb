"""Human-readable verification report."""

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined
from rich.markup import escape

RULE = "─" * 50

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)

REPORT_TEMPLATE = """
[bold]Wikilink Verification Report[/bold]
[dim]{{ rule }}[/dim]
Workspace: [cyan]{{ workspace }}[/cyan]
Files scanned: [cyan]{{ total_files }}[/cyan]
Total wikilinks: [cyan]{{ total_links }}[/cyan]
{% if groups %}
Broken links: [red]{{ broken_count }}[/red]

[dim]{{ rule }}[/dim]

[bold red]Broken Links:[/bold red]
{% for source, links in groups %}

[yellow]{{ source }}:[/yellow]
{% for link in links %}
  [dim]{{ link.line }}:{{ link.column }}[/dim]  [red]{{ link.raw }}[/red] → [dim]{{ link.target }}[/dim]
{% endfor %}
{% endfor %}
{% else %}
Broken links: [green]0[/green]

[bold green]✓ All wikilinks are valid![/bold green]
{% endif %}

"""

_REPORT = _ENV.from_string(REPORT_TEMPLATE)


def _group_by_source(broken_links: list[dict[str, Any]]) -> list[tuple[str, list[dict[str, Any]]]]:
    grouped: dict[str, list[dict[str, Any]]] = {}
    for link in broken_links:
        grouped.setdefault(escape(link["source"]), []).append(
            {
                "line": link["line"],
                "column": link["column"],
                "raw": escape(link["raw"]),
                "target": escape(link["target"]),
            }
        )
    return list(grouped.items())


def render_report(output: dict[str, Any]) -> str:
    """Render LinkVerifyOutput as rich markup."""
    broken_links = output["broken_links"]
    return _REPORT.render(
        rule=RULE,
        workspace=escape(output["workspace_path"]),
        total_files=output["total_files"],
        total_links=output["total_links"],
        broken_count=len(broken_links),
        groups=_group_by_source(broken_links),
    )
