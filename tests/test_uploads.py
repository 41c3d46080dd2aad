import os
import re

import pytest

from conftest import auth_headers
from folio.core.exceptions import UploadRejected
from folio.services.upload_service import MAX_UPLOAD_BYTES, check_declared_length, generate_filename

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def stored_files(settings, directory=""):
    path = os.path.join(settings.UPLOAD_DIR, directory)
    return [name for name in os.listdir(path) if os.path.isfile(os.path.join(path, name))]


def test_upload_directories_created_at_startup(settings, client):
    assert os.path.isdir(os.path.join(settings.UPLOAD_DIR, "profiles"))
    assert os.path.isdir(os.path.join(settings.UPLOAD_DIR, "projects"))


def test_profile_image_upload(settings, client, alice):
    _, token = alice

    response = client.post(
        "/api/upload/profile",
        files={"file": ("avatar.png", PNG_BYTES, "image/png")},
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["originalName"] == "avatar.png"
    assert body["size"] == len(PNG_BYTES)
    assert re.fullmatch(r"\d+-\d{9}\.png", body["filename"])
    assert body["url"] == f"/uploads/profiles/{body['filename']}"
    assert stored_files(settings, "profiles") == [body["filename"]]

    served = client.get(body["url"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_project_and_general_buckets(settings, client, alice):
    _, token = alice

    project = client.post(
        "/api/upload/project",
        files={"file": ("shot.JPG", PNG_BYTES, "image/jpeg")},
        headers=auth_headers(token),
    ).json()
    general = client.post(
        "/api/upload/misc",
        files={"file": ("pic.webp", PNG_BYTES, "image/webp")},
        headers=auth_headers(token),
    ).json()

    assert project["url"].startswith("/uploads/projects/")
    assert project["filename"].endswith(".JPG")
    assert general["url"] == f"/uploads/{general['filename']}"
    assert stored_files(settings) == [general["filename"]]


def test_text_file_is_rejected_and_not_written(settings, client, alice):
    _, token = alice

    response = client.post(
        "/api/upload/profile",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "INVALID_FILE_TYPE"
    assert stored_files(settings, "profiles") == []


def test_extension_and_content_type_must_both_match(settings, client, alice):
    _, token = alice

    disguised = client.post(
        "/api/upload/profile",
        files={"file": ("script.png", b"#!/bin/sh", "application/x-sh")},
        headers=auth_headers(token),
    )
    renamed = client.post(
        "/api/upload/profile",
        files={"file": ("image.exe", PNG_BYTES, "image/png")},
        headers=auth_headers(token),
    )

    assert disguised.status_code == renamed.status_code == 400
    assert stored_files(settings, "profiles") == []


def test_oversized_file_is_rejected(settings, client, alice):
    _, token = alice

    response = client.post(
        "/api/upload/profile",
        files={"file": ("big.png", b"\x00" * (MAX_UPLOAD_BYTES + 1), "image/png")},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "FILE_TOO_LARGE"
    assert stored_files(settings, "profiles") == []


def test_missing_file(client, alice):
    _, token = alice

    response = client.post("/api/upload/profile", data={"note": "no file"}, headers=auth_headers(token))

    assert response.status_code == 400
    assert response.json()["error_code"] == "NO_FILE_UPLOADED"


def test_more_than_one_file(settings, client, alice):
    _, token = alice

    response = client.post(
        "/api/upload/profile",
        files=[
            ("file", ("a.png", PNG_BYTES, "image/png")),
            ("file", ("b.png", PNG_BYTES, "image/png")),
        ],
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "TOO_MANY_FILES"
    assert stored_files(settings, "profiles") == []


def test_upload_requires_auth(client):
    response = client.post("/api/upload/profile", files={"file": ("a.png", PNG_BYTES, "image/png")})

    assert response.status_code == 401


def test_declared_length_is_checked_before_parsing():
    check_declared_length(None)
    check_declared_length(str(MAX_UPLOAD_BYTES))

    with pytest.raises(UploadRejected) as exc_info:
        check_declared_length(str(MAX_UPLOAD_BYTES * 2))

    assert exc_info.value.error_code == "FILE_TOO_LARGE"


def test_generated_names_keep_extension_and_differ():
    names = {generate_filename("photo.jpeg") for _ in range(50)}

    assert len(names) == 50
    assert all(name.endswith(".jpeg") for name in names)
