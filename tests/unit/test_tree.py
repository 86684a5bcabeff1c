"""Unit tests for project tree mapping."""

import pytest
from googleapiclient.errors import HttpError

from gdp.sdk.drive import (
    NodeKind, TreeNode, map_folder, map_folder_iterative, tree_to_dicts, count_nodes
)
from gdp.sdk.exceptions import InvalidItemIdError, LocalPathError

DOC = "application/vnd.google-apps.document"
FOLDER = "application/vnd.google-apps.folder"


def doc(item_id):
    return {"id": item_id, "name": f"Title {item_id}", "mimeType": DOC}


def folder(item_id):
    return {"id": item_id, "name": f"Title {item_id}", "mimeType": FOLDER}


MAPPERS = [map_folder, map_folder_iterative]


@pytest.mark.parametrize("mapper", MAPPERS)
class TestMapFolder:
    """Behaviour shared by the recursive and stack-based mappers."""

    def test_empty_folder(self, mapper, drive_service_factory):
        service = drive_service_factory({"root": []})
        assert mapper(service, "root") == []

    def test_documents_only(self, mapper, drive_service_factory):
        service = drive_service_factory({"root": [doc("doc1"), doc("doc2"), doc("doc3")]})

        nodes = mapper(service, "root")

        assert len(nodes) == 3
        for node in nodes:
            assert node.kind is NodeKind.DOCUMENT
            assert node.children is None
        assert nodes[0].title == "Title doc1"
        assert nodes[0].mime_type == DOC

    def test_nested_folder(self, mapper, drive_service_factory):
        service = drive_service_factory({
            "root": [folder("folderA")],
            "folderA": [doc("doc1")],
        })

        result = tree_to_dicts(mapper(service, "root"))

        assert result == [{
            "id": "folderA",
            "title": "Title folderA",
            "mime_type": FOLDER,
            "kind": "folder",
            "children": [{
                "id": "doc1",
                "title": "Title doc1",
                "mime_type": DOC,
                "kind": "doc",
            }],
        }]

    def test_preserves_listing_order(self, mapper, drive_service_factory):
        service = drive_service_factory({
            "root": [doc("docB"), folder("folderC"), doc("docA")],
            "folderC": [],
        })

        nodes = mapper(service, "root")

        assert [n.id for n in nodes] == ["docB", "folderC", "docA"]
        assert nodes[1].children == []

    def test_skips_unknown_mime_types(self, mapper, drive_service_factory):
        service = drive_service_factory({
            "root": [
                {"id": "pdf1", "name": "scan.pdf", "mimeType": "application/pdf"},
                doc("doc1"),
                {"id": "sheet1", "name": "Budget", "mimeType": "application/vnd.google-apps.spreadsheet"},
            ],
        })

        nodes = mapper(service, "root")

        assert [n.id for n in nodes] == ["doc1"]

    def test_top_level_failure_propagates(self, mapper, drive_service_factory):
        service = drive_service_factory({}, failing={"root"})

        with pytest.raises(HttpError):
            mapper(service, "root")

    def test_nested_failure_aborts_whole_tree(self, mapper, drive_service_factory):
        service = drive_service_factory(
            {
                "root": [doc("doc1"), folder("folderA"), folder("folderB")],
                "folderA": [folder("deep")],
                "folderB": [doc("doc2")],
            },
            failing={"deep"},
        )

        with pytest.raises(HttpError):
            mapper(service, "root")
        assert "folderB" not in service.listed

    def test_rejects_invalid_folder_id(self, mapper, drive_service_factory):
        service = drive_service_factory({})

        with pytest.raises(InvalidItemIdError):
            mapper(service, "")
        with pytest.raises(LocalPathError):
            mapper(service, "~/projects")
        assert service.listed == []


def test_mappers_list_folders_in_same_order(drive_service_factory):
    folders = {
        "root": [folder("a"), doc("d1"), folder("b")],
        "a": [folder("a1"), folder("a2")],
        "a1": [doc("d2")],
        "a2": [],
        "b": [doc("d3"), folder("b1")],
        "b1": [],
    }
    recursive_service = drive_service_factory(folders)
    iterative_service = drive_service_factory(folders)

    recursive = map_folder(recursive_service, "root")
    iterative = map_folder_iterative(iterative_service, "root")

    assert recursive == iterative
    assert recursive_service.listed == ["root", "a", "a1", "a2", "b", "b1"]
    assert iterative_service.listed == recursive_service.listed


def test_deep_hierarchy_with_iterative_mapper(drive_service_factory):
    depth = 2000
    folders = {f"f{i}": [folder(f"f{i + 1}")] for i in range(depth)}
    folders[f"f{depth}"] = [doc("leaf")]
    service = drive_service_factory(folders)

    nodes = map_folder_iterative(service, "f0")

    node = nodes[0]
    for _ in range(depth - 1):
        node = node.children[0]
    assert node.children[0].id == "leaf"


def test_document_dict_has_no_children_key():
    node = TreeNode(id="doc1", title="Notes", mime_type=DOC, kind=NodeKind.DOCUMENT)
    assert "children" not in node.to_dict()


def test_count_nodes():
    tree = [
        TreeNode(id="d1", title="d1", mime_type=DOC, kind=NodeKind.DOCUMENT),
        TreeNode(id="f1", title="f1", mime_type=FOLDER, kind=NodeKind.FOLDER, children=[
            TreeNode(id="d2", title="d2", mime_type=DOC, kind=NodeKind.DOCUMENT),
            TreeNode(id="f2", title="f2", mime_type=FOLDER, kind=NodeKind.FOLDER, children=[]),
        ]),
    ]
    assert count_nodes(tree) == {"documents": 2, "folders": 2}
