"""
Human-readable rendering of analysis results with rich.
"""

from typing import Dict, List

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.types import ConceptNode, ImpactLevel, ImpactReport, RiskLevel, TreeStats

IMPACT_STYLES: Dict[ImpactLevel, str] = {
    ImpactLevel.DIRECT: "bold red",
    ImpactLevel.INDIRECT: "yellow",
    ImpactLevel.POTENTIAL: "cyan",
    ImpactLevel.SAFE: "green",
}

RISK_STYLES: Dict[RiskLevel, str] = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "dark_orange",
    RiskLevel.CRITICAL: "bold red",
}


def format_impact_report(report: ImpactReport) -> Group:
    """Risk panel, impacted file table and critical paths."""
    risk = report.risk
    metrics = report.metrics

    summary = Text()
    summary.append(f"Risk: {risk.score}/100 ", style="bold")
    summary.append(risk.level.value.upper(), style=RISK_STYLES[risk.level])
    summary.append(
        f"\nDirect: {metrics.direct_impact}  Indirect: {metrics.indirect_impact}  "
        f"Potential: {metrics.potential_impact}  Total: {metrics.total_impact}  "
        f"Max chain: {metrics.max_chain_length}"
    )
    for factor in risk.factors:
        summary.append(f"\n• {factor}")

    table = Table(title="Impacted files", show_lines=False)
    table.add_column("File", overflow="fold")
    table.add_column("Kind")
    table.add_column("Impact")
    table.add_column("Distance", justify="right")
    table.add_column("Weight", justify="right")

    for node in report.impacted_files:
        if node.path == report.origin:
            continue
        table.add_row(
            node.path,
            node.type.value,
            Text(node.impact_level.value, style=IMPACT_STYLES[node.impact_level]),
            str(node.distance),
            f"{node.weight:.1f}",
        )

    parts = [Panel(summary, title=f"Impact of {report.origin}"), table]

    if metrics.critical_paths:
        paths = Text("Critical paths:", style="bold")
        for path in metrics.critical_paths:
            paths.append("\n  " + " → ".join(path))
        parts.append(paths)

    return Group(*parts)


def format_concepts(concepts: List[ConceptNode], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Concept", overflow="fold")
    table.add_column("Category")
    table.add_column("Weight", justify="right")
    table.add_column("Files", justify="right")
    table.add_column("Description", overflow="fold")

    for concept in concepts:
        table.add_row(
            concept.id,
            concept.category,
            f"{concept.weight:.1f}",
            str(len(concept.files)),
            concept.description,
        )
    return table


def format_tree_stats(stats: TreeStats) -> Table:
    table = Table(title="Repository statistics", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Files", str(stats.total_files))
    table.add_row("Folders", str(stats.total_folders))
    table.add_row("Total size", str(stats.total_size))
    table.add_row("Max depth", str(stats.max_depth))
    table.add_row("Main language", stats.main_language)
    for ext, count in sorted(stats.file_types.items(), key=lambda item: -item[1]):
        table.add_row(f".{ext}", str(count))
    return table
