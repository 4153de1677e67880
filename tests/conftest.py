"""Shared document fixtures for the yaml-node-query test suite."""

from __future__ import annotations

import pytest

from yaml_node_query.api import parse_document
from yaml_node_query.tree.nodes import TreeNode

PETSTORE = b"""\
openapi: 3.1.0
info:
  title: Petstore
  version: 1.0.0
tags:
  - name: pets
  - name: store
paths:
  /pets:
    get:
      operationId: listPets
      parameters:
        - name: limit
          in: query
          required: false
      responses:
        '200':
          description: A list of pets
        404:
          description: Not found
        default:
          description: unexpected error
"""


@pytest.fixture
def petstore() -> bytes:
    """A small OpenAPI 3 document with quoted and unquoted status-code keys."""
    return PETSTORE


@pytest.fixture
def petstore_tree() -> TreeNode:
    """The petstore document parsed into a TreeNode tree."""
    root = parse_document(PETSTORE)
    assert root is not None
    return root
