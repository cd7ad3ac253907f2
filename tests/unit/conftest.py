"""Shared fixtures: a small React/Next.js repository snapshot."""

import json

import pytest

from repolens.core.types import DependencyEdge, TreeNode


def _blob(path: str, size: int = 0) -> dict:
    return {"name": path.rsplit("/", 1)[-1], "path": path, "type": "blob", "size": size}


def _dir(path: str, children: list) -> dict:
    return {"name": path.rsplit("/", 1)[-1] or "repo", "path": path, "type": "tree", "children": children}


TREE_DATA = _dir("", [
    _dir("src", [
        _dir("src/components", [
            _blob("src/components/Button.tsx", 120),
            _blob("src/components/UserProfile.tsx", 240),
        ]),
        _dir("src/hooks", [
            _blob("src/hooks/useAuth.ts", 80),
        ]),
        _dir("src/lib", [
            _blob("src/lib/api.ts", 60),
        ]),
        _dir("src/app", [
            _dir("src/app/api", [
                _dir("src/app/api/github", [
                    _blob("src/app/api/github/route.ts", 40),
                ]),
            ]),
        ]),
    ]),
    _blob("README.md", 10),
])

CONTENTS = {
    "src/components/Button.tsx": (
        "import React from 'react'\n"
        "\n"
        "/**\n"
        " * Primary action button\n"
        " */\n"
        "export function Button({ label }) {\n"
        "  return <button>{label}</button>\n"
        "}\n"
    ),
    "src/components/UserProfile.tsx": (
        "import { Button } from './Button'\n"
        "import { useAuth } from '../hooks/useAuth'\n"
        "\n"
        "export function UserProfile() {\n"
        "  const { user } = useAuth()\n"
        "  return <Button label={user.name} />\n"
        "}\n"
    ),
    "src/hooks/useAuth.ts": (
        "import { createContext } from 'react'\n"
        "\n"
        "export const AuthContext = createContext(null)\n"
        "\n"
        "export function useAuth() {\n"
        "  return { user: null }\n"
        "}\n"
    ),
    "src/lib/api.ts": (
        "export const fetchTree = async (repo) => {\n"
        "  return fetch(repo)\n"
        "}\n"
    ),
    "src/app/api/github/route.ts": (
        "import { fetchTree } from '../../../lib/api'\n"
        "\n"
        "export async function GET(request) {\n"
        "  return fetchTree(request.url)\n"
        "}\n"
    ),
    "README.md": "# Demo\n",
}

DEPENDENCIES = [
    {"source": "src/components/UserProfile.tsx", "target": "src/components/Button.tsx", "type": "import"},
    {"source": "src/components/UserProfile.tsx", "target": "src/hooks/useAuth.ts", "type": "import"},
    {"source": "src/hooks/useAuth.ts", "target": "src/lib/api.ts", "type": "import"},
    {"source": "src/app/api/github/route.ts", "target": "src/lib/api.ts", "type": "reference", "weight": 3},
]


@pytest.fixture
def sample_tree() -> TreeNode:
    return TreeNode.model_validate(TREE_DATA)


@pytest.fixture
def sample_contents() -> dict:
    return dict(CONTENTS)


@pytest.fixture
def sample_edges() -> list:
    return [DependencyEdge(**edge) for edge in DEPENDENCIES]


@pytest.fixture
def snapshot_file(tmp_path):
    """Analysis snapshot written to disk, as consumed by the CLI."""
    path = tmp_path / "analysis.json"
    path.write_text(json.dumps({
        "tree": TREE_DATA,
        "dependencies": DEPENDENCIES,
        "contents": CONTENTS,
    }))
    return path

