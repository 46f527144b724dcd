"""GraphQL requests for the monday.com API.

Every identifier travels as a GraphQL variable; nothing user- or
board-supplied is interpolated into query text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass(frozen=True)
class GraphQLRequest:
    name: str
    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def payload(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


def list_boards(*, limit: int, page: int = 1) -> GraphQLRequest:
    return GraphQLRequest(
        name="list_boards",
        query="query ($limit: Int!, $page: Int!) { boards(limit: $limit, page: $page) { id name } }",
        variables={"limit": int(limit), "page": int(page)},
    )


def duplicate_board(*, board_id: str, board_name: str) -> GraphQLRequest:
    return GraphQLRequest(
        name="duplicate_board",
        query=(
            "mutation ($boardId: ID!, $boardName: String!) { "
            "duplicate_board(board_id: $boardId, duplicate_type: duplicate_board_with_structure, board_name: $boardName) "
            "{ board { id name } } }"
        ),
        variables={"boardId": str(board_id), "boardName": board_name},
    )


def board_columns(*, board_id: str) -> GraphQLRequest:
    return GraphQLRequest(
        name="board_columns",
        query="query ($boardIds: [ID!]) { boards(ids: $boardIds) { columns { id title type } } }",
        variables={"boardIds": [str(board_id)]},
    )


def board_groups(*, board_id: str) -> GraphQLRequest:
    return GraphQLRequest(
        name="board_groups",
        query="query ($boardIds: [ID!]) { boards(ids: $boardIds) { groups { id title } } }",
        variables={"boardIds": [str(board_id)]},
    )


def create_group(*, board_id: str, group_name: str) -> GraphQLRequest:
    return GraphQLRequest(
        name="create_group",
        query="mutation ($boardId: ID!, $groupName: String!) { create_group(board_id: $boardId, group_name: $groupName) { id } }",
        variables={"boardId": str(board_id), "groupName": group_name},
    )


def group_items(*, board_id: str, group_id: str, limit: int) -> GraphQLRequest:
    return GraphQLRequest(
        name="group_items",
        query=(
            "query ($boardIds: [ID!], $groupIds: [String], $limit: Int!) { "
            "boards(ids: $boardIds) { groups(ids: $groupIds) { "
            "items_page(limit: $limit) { cursor items { id name } } } } }"
        ),
        variables={"boardIds": [str(board_id)], "groupIds": [group_id], "limit": int(limit)},
    )


def next_items(*, cursor: str, limit: int) -> GraphQLRequest:
    return GraphQLRequest(
        name="next_items",
        query="query ($cursor: String!, $limit: Int!) { next_items_page(cursor: $cursor, limit: $limit) { cursor items { id name } } }",
        variables={"cursor": cursor, "limit": int(limit)},
    )


def create_item(*, board_id: str, group_id: str, item_name: str) -> GraphQLRequest:
    return GraphQLRequest(
        name="create_item",
        query=(
            "mutation ($boardId: ID!, $groupId: String!, $itemName: String!) { "
            "create_item(board_id: $boardId, group_id: $groupId, item_name: $itemName) { id } }"
        ),
        variables={"boardId": str(board_id), "groupId": group_id, "itemName": item_name},
    )


def item_column_values(*, item_id: str, column_ids: Sequence[str]) -> GraphQLRequest:
    return GraphQLRequest(
        name="item_column_values",
        query="query ($itemIds: [ID!], $columnIds: [String!]) { items(ids: $itemIds) { column_values(ids: $columnIds) { id text } } }",
        variables={"itemIds": [str(item_id)], "columnIds": list(column_ids)},
    )


def change_column_values(*, board_id: str, item_id: str, values: dict[str, Any]) -> GraphQLRequest:
    return GraphQLRequest(
        name="change_column_values",
        query=(
            "mutation ($boardId: ID!, $itemId: ID!, $columnValues: JSON!) { "
            "change_multiple_column_values(item_id: $itemId, board_id: $boardId, column_values: $columnValues) { id } }"
        ),
        variables={"boardId": str(board_id), "itemId": str(item_id), "columnValues": json.dumps(values)},
    )
