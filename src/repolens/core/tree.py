"""
File tree helpers.

Read-only walks over a caller-supplied repository tree: file enumeration,
extension counts and summary statistics.
"""

from typing import Dict, Iterator, List, Optional

from .types import FileKind, TreeNode, TreeStats

# Extensions never reported as a repository's main language
NON_LANGUAGE_EXTENSIONS = {"unknown", "md", "json"}

_KIND_BY_EXTENSION: Dict[str, FileKind] = {
    **{ext: FileKind.SCRIPT for ext in ("js", "jsx", "ts", "tsx")},
    **{ext: FileKind.STYLE for ext in ("css", "scss", "less", "sass")},
    **{ext: FileKind.MARKUP for ext in ("html", "xml", "svg")},
    **{ext: FileKind.CONFIG for ext in ("json", "yml", "yaml", "toml")},
    **{ext: FileKind.DOCUMENT for ext in ("md", "txt", "pdf")},
    **{ext: FileKind.IMAGE for ext in ("jpg", "png", "gif")},
}


def file_name(path: str) -> str:
    """Last segment of a slash-separated path."""
    return path.rsplit("/", 1)[-1] or path


def file_extension(path: str) -> str:
    """Lower-cased extension without the dot ('' when there is none)."""
    name = file_name(path)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def classify_file(path: str) -> FileKind:
    """Classify a file by its extension."""
    return _KIND_BY_EXTENSION.get(file_extension(path), FileKind.UNKNOWN)


def iter_blobs(tree: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield every file node, depth-first in child order."""
    if tree is None:
        return
    stack = [tree]
    while stack:
        node = stack.pop()
        if node.is_file:
            yield node
        else:
            stack.extend(reversed(node.children))


def get_all_file_paths(tree: Optional[TreeNode]) -> List[str]:
    return [node.path for node in iter_blobs(tree)]


def analyze_file_types(tree: Optional[TreeNode]) -> Dict[str, int]:
    """Count files per extension ('unknown' for files without one)."""
    counts: Dict[str, int] = {}
    for node in iter_blobs(tree):
        ext = file_extension(node.name) or "unknown"
        counts[ext] = counts.get(ext, 0) + 1
    return counts


def detect_main_language(file_types: Dict[str, int]) -> str:
    """Most frequent extension, ignoring docs and data files. First seen wins ties."""
    main_language = "unknown"
    max_count = 0
    for ext, count in file_types.items():
        if ext in NON_LANGUAGE_EXTENSIONS:
            continue
        if count > max_count:
            max_count = count
            main_language = ext
    return main_language


def calculate_tree_stats(tree: Optional[TreeNode]) -> TreeStats:
    """
    Summarize a file tree.

    The root counts as a folder at depth 0; max_depth is the deepest level
    reached by any entry.
    """
    if tree is None:
        return TreeStats()

    total_files = 0
    total_folders = 0
    total_size = 0
    max_depth = 0

    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        if node.is_file:
            total_files += 1
            total_size += node.size or 0
        else:
            total_folders += 1
            stack.extend((child, depth + 1) for child in node.children)

    file_types = analyze_file_types(tree)
    return TreeStats(
        total_files=total_files,
        total_folders=total_folders,
        total_size=total_size,
        max_depth=max_depth,
        file_types=file_types,
        main_language=detect_main_language(file_types),
    )
