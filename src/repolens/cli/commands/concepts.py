"""
Concepts Command - Knowledge graph views.

Builds the knowledge graph from a snapshot's tree and file contents, then
shows one view: central concepts (default), search results, related
concepts, or concepts grouped by category.
"""

import json
import logging
import sys

import click
from rich.console import Console

from ...config import AnalysisConfig
from ...core.exceptions import RepoLensError
from ...knowledge.concepts import ConceptExtractor
from ...knowledge.graph import KnowledgeGraphIndex, build_knowledge_graph
from ..formatting import format_concepts
from ..utils import DEFAULT_INPUT_FILE, echo_error, echo_warning, load_analysis_input

logger = logging.getLogger(__name__)

console = Console()


def _dump(concepts) -> list:
    return [c.model_dump(mode="json") for c in concepts]


@click.command()
@click.option("-i", "--input", "input_file", default=DEFAULT_INPUT_FILE,
              help="Analysis snapshot JSON (tree + contents) or directory")
@click.option("--top", type=int, default=None, help="Number of results (default from config: 10)")
@click.option("--search", "query", default=None, help="Search concepts by text")
@click.option("--related", "related_id", default=None, help="Show concepts related to this concept id")
@click.option("--by-category", is_flag=True, help="Group all concepts by category")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def concepts(
    ctx: click.Context,
    input_file: str,
    top: int | None,
    query: str | None,
    related_id: str | None,
    by_category: bool,
    as_json: bool,
):
    """
    Explore concepts extracted from the repository.
    """
    config: AnalysisConfig = (ctx.obj or {}).get("config") or AnalysisConfig()
    limit = top if top is not None else config.result_limit

    try:
        snapshot = load_analysis_input(input_file)
    except RepoLensError as e:
        echo_error(str(e))
        sys.exit(1)

    extractor = ConceptExtractor(extensions=config.concept_extensions)
    graph = build_knowledge_graph(snapshot.tree, snapshot.contents, extractor=extractor)
    index = KnowledgeGraphIndex(graph)

    if query is not None:
        results = index.search(query)
        if as_json:
            click.echo(json.dumps({"query": query, "results": _dump(results)}, indent=2))
        else:
            console.print(format_concepts(results, f"Search: {query}"))
        return

    if related_id is not None:
        if not index.has_concept(related_id) and not as_json:
            echo_warning(f"Unknown concept: {related_id}")
        related = index.related_concepts(related_id, limit)
        if as_json:
            click.echo(json.dumps({
                "concept": related_id,
                "directly_related": _dump(related.directly_related),
                "indirectly_related": _dump(related.indirectly_related),
            }, indent=2))
        else:
            console.print(format_concepts(related.directly_related, "Directly related"))
            console.print(format_concepts(related.indirectly_related, "Indirectly related"))
        return

    if by_category:
        groups = index.concepts_by_category()
        if as_json:
            click.echo(json.dumps({cat: _dump(nodes) for cat, nodes in groups.items()}, indent=2))
        else:
            for category, nodes in groups.items():
                console.print(format_concepts(nodes, category))
        return

    central = index.central_concepts(limit)
    if as_json:
        click.echo(json.dumps({
            "total_concepts": index.node_count,
            "total_relationships": index.edge_count,
            "central_concepts": _dump(central),
        }, indent=2))
    else:
        console.print(format_concepts(central, "Central concepts"))
