# backend/tests/api/test_files.py
from datetime import datetime

from fastapi import status
from pydantic import TypeAdapter

def test_create_file(client, sample_project):
    """Test file creation"""
    response = client.post(
        "/api/files",
        json={
            "project_id": sample_project.id,
            "path": "src/app.ts",
            "content": "export const x = 1;"
        }
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["path"] == "src/app.ts"
    assert data["project_id"] == sample_project.id
    assert data["content"] == "export const x = 1;"
    assert data["language"] == "typescript"
    assert data["is_modified"] is None

def test_create_file_keeps_explicit_language(client, sample_project):
    response = client.post(
        "/api/files",
        json={"project_id": sample_project.id, "path": "Makefile", "language": "makefile"}
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["language"] == "makefile"

def test_create_file_unknown_project(client):
    response = client.post("/api/files", json={"project_id": 99999, "path": "a.txt"})
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_create_file_duplicate_path(client, sample_file):
    """Paths are unique within a project"""
    response = client.post(
        "/api/files",
        json={"project_id": sample_file.project_id, "path": sample_file.path}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "already exists" in response.json()["error"]

def test_same_path_in_other_project(client, sample_file):
    other = client.post("/api/projects", json={"name": "Other"}).json()
    response = client.post("/api/files", json={"project_id": other["id"], "path": sample_file.path})
    assert response.status_code == status.HTTP_201_CREATED

def test_create_file_missing_path(client, sample_project):
    response = client.post("/api/files", json={"project_id": sample_project.id})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_get_file(client, sample_file):
    """Test getting a single file"""
    response = client.get(f"/api/files/{sample_file.id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["path"] == sample_file.path
    assert data["content"] == sample_file.content

def test_get_nonexistent_file(client):
    response = client.get("/api/files/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "File not found"}

def test_list_project_files_sorted_by_path(client, sample_project):
    for path in ["z.txt", "a/b.txt", "m.py"]:
        client.post("/api/files", json={"project_id": sample_project.id, "path": path})

    response = client.get(f"/api/projects/{sample_project.id}/files")

    assert response.status_code == status.HTTP_200_OK
    assert [f["path"] for f in response.json()] == ["a/b.txt", "m.py", "z.txt"]

def test_list_files_for_missing_project(client):
    response = client.get("/api/projects/99999/files")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_list_files_filtered(client, sample_file):
    response = client.get("/api/files", params={
        "project_id": sample_file.project_id,
        "path": sample_file.path
    })

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == sample_file.id

def test_update_file(client, sample_file):
    """Test updating a file"""
    response = client.put(
        f"/api/files/{sample_file.id}",
        json={"content": "print('bye')\n", "is_modified": True}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["content"] == "print('bye')\n"
    assert data["is_modified"] is True
    assert data["path"] == sample_file.path
    assert data["language"] == "python"

def test_update_file_moves_updated_at_forward(client, sample_file):
    parse = TypeAdapter(datetime).validate_python
    before = client.get(f"/api/files/{sample_file.id}").json()

    after = client.put(f"/api/files/{sample_file.id}", json={"content": "pass\n"}).json()

    assert parse(after["updated_at"]) > parse(before["updated_at"])
    assert parse(after["updated_at"]).utcoffset().total_seconds() == 0

def test_rename_file_redetects_language(client, sample_file):
    response = client.put(f"/api/files/{sample_file.id}", json={"path": "src/main.rs"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["path"] == "src/main.rs"
    assert data["language"] == "rust"

def test_rename_file_onto_existing_path(client, sample_file):
    other = client.post(
        "/api/files",
        json={"project_id": sample_file.project_id, "path": "README.md"}
    ).json()

    response = client.put(f"/api/files/{other['id']}", json={"path": sample_file.path})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_update_nonexistent_file(client):
    response = client.put("/api/files/99999", json={"content": "x"})
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_delete_file(client, sample_file):
    """Test deleting a file"""
    response = client.delete(f"/api/files/{sample_file.id}")

    assert response.status_code == status.HTTP_204_NO_CONTENT

    get_response = client.get(f"/api/files/{sample_file.id}")
    assert get_response.status_code == status.HTTP_404_NOT_FOUND

def test_delete_nonexistent_file(client):
    response = client.delete("/api/files/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_project_tree(client, sample_project):
    for path in ["src/app.py", "src/utils/io.py", "README.md", "src/__init__.py"]:
        client.post("/api/files", json={"project_id": sample_project.id, "path": path})

    response = client.get(f"/api/projects/{sample_project.id}/tree")

    assert response.status_code == status.HTTP_200_OK
    tree = response.json()
    assert [node["name"] for node in tree] == ["README.md", "src"]

    readme, src = tree
    assert readme["type"] == "file"
    assert readme["file"]["path"] == "README.md"
    assert readme["children"] is None

    assert src["type"] == "folder"
    assert src["file"] is None
    assert [child["path"] for child in src["children"]] == [
        "src/__init__.py", "src/app.py", "src/utils"
    ]
    utils = src["children"][2]
    assert utils["children"][0]["file"]["path"] == "src/utils/io.py"

def test_project_tree_duplicate_normalized_paths(client, sample_project):
    """Paths that normalize to the same leaf resolve to one file, the same one every time"""
    for path in ["src/a.py", "src//a.py"]:
        response = client.post("/api/files", json={"project_id": sample_project.id, "path": path})
        assert response.status_code == status.HTTP_201_CREATED

    for _ in range(2):
        tree = client.get(f"/api/projects/{sample_project.id}/tree").json()
        src = tree[0]
        assert len(src["children"]) == 1
        assert src["children"][0]["file"]["path"] == "src//a.py"

def test_project_tree_missing_project(client):
    response = client.get("/api/projects/99999/tree")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_import_files(client, sample_file):
    """Import creates new paths and overwrites existing ones"""
    response = client.post(
        f"/api/projects/{sample_file.project_id}/files/import",
        json={"files": [
            {"path": sample_file.path, "content": "print('imported')\n"},
            {"path": "docs/index.md", "content": "# Docs"}
        ]}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["created"] == 1
    assert data["updated"] == 1
    by_path = {f["path"]: f for f in data["files"]}
    assert by_path[sample_file.path]["content"] == "print('imported')\n"
    assert by_path[sample_file.path]["id"] == sample_file.id
    assert by_path["docs/index.md"]["language"] == "markdown"

    listed = client.get(f"/api/projects/{sample_file.project_id}/files").json()
    assert len(listed) == 2

def test_import_files_missing_project(client):
    response = client.post("/api/projects/99999/files/import", json={"files": []})
    assert response.status_code == status.HTTP_404_NOT_FOUND
