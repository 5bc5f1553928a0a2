from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_editor

from flowgraph.editor import WorkflowEditor
from flowgraph.graph import (
    GraphMutator,
    GraphStore,
    NodeFactory,
    NodeKind,
    SequentialIdentifierSource,
)


@pytest.fixture()
def factory() -> NodeFactory:
    return NodeFactory(ids=SequentialIdentifierSource())


@pytest.fixture()
def mutator(factory: NodeFactory) -> GraphMutator:
    return GraphMutator(factory=factory)


@pytest.fixture()
def store(factory: NodeFactory) -> GraphStore:
    return GraphStore.with_root(factory.create(NodeKind.START))


@pytest.fixture()
def editor() -> WorkflowEditor:
    return WorkflowEditor(ids=SequentialIdentifierSource())


@pytest.fixture()
def client(editor: WorkflowEditor):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_editor] = lambda: editor
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
