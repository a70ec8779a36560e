import base64

import pytest

from .client import Client
from .git import CommitAuthor
from .repos_contents import (
    ArchiveFormat,
    RepositoryContent,
    RepositoryContentFileOptions,
    RepositoryContentGetOptions,
)


def describe_RepositoryContent():
    def describe_decoded_content():
        def it_decodes_base64():
            content = RepositoryContent(encoding="base64", content=base64.b64encode(b"hello").decode())

            assert content.decoded_content() == b"hello"

        def it_returns_unencoded_content_as_is():
            assert RepositoryContent(content="plain").decoded_content() == b"plain"

        def it_rejects_base64_without_content():
            with pytest.raises(ValueError, match="malformed"):
                RepositoryContent(encoding="base64").decoded_content()

        def it_rejects_large_files_without_content():
            with pytest.raises(ValueError, match="1 MB"):
                RepositoryContent(encoding="none").decoded_content()

        def it_rejects_unknown_encodings():
            with pytest.raises(ValueError, match="unsupported content encoding: rot13"):
                RepositoryContent(encoding="rot13", content="x").decoded_content()


def describe_ContentsMixin():
    def it_gets_the_readme(client: Client, mux):
        mux.route("/repos/o/r/readme", method="GET", json={"type": "file", "name": "README.md"})

        readme, _ = client.repositories.get_readme("o", "r", RepositoryContentGetOptions(ref="dev"))

        assert readme.name == "README.md"
        assert mux.last_params() == {"ref": "dev"}

    def describe_get_contents():
        def it_returns_a_file(client: Client, mux):
            mux.route(
                "/repos/o/r/contents/docs/a.md",
                method="GET",
                json={"type": "file", "encoding": "base64", "content": base64.b64encode(b"# A").decode()},
            )

            file, directory, _ = client.repositories.get_contents("o", "r", "/docs/a.md/")

            assert directory is None
            assert file.decoded_content() == b"# A"

        def it_returns_a_directory(client: Client, mux):
            mux.route("/repos/o/r/contents/docs", method="GET", json=[{"name": "a.md"}, {"name": "b.md"}])

            file, directory, _ = client.repositories.get_contents("o", "r", "docs")

            assert file is None
            assert [d.name for d in directory] == ["a.md", "b.md"]

        def it_escapes_the_path(client: Client, mux):
            mux.route("/repos/o/r/contents/some dir/a#b.md", json={"name": "a#b.md"})

            client.repositories.get_contents("o", "r", "some dir/a#b.md")

            assert b"/contents/some%20dir/a%23b.md" in mux.last.url.raw_path

        def it_refuses_parent_directory_segments(client: Client, mux):
            with pytest.raises(ValueError, match=r"\.\."):
                client.repositories.get_contents("o", "r", "docs/../secret")

            assert mux.requests == []

        def it_rejects_unexpected_payloads(client: Client, mux):
            mux.route("/repos/o/r/contents/x", json="surprise")

            with pytest.raises(ValueError, match="unmarshalling failed"):
                client.repositories.get_contents("o", "r", "x")

    def describe_files():
        def it_creates_a_file_with_base64_content(client: Client, mux):
            mux.route(
                "/repos/o/r/contents/a.txt",
                method="PUT",
                status=201,
                json={"content": {"name": "a.txt"}, "commit": {"sha": "c1", "message": "add"}},
            )

            result, _ = client.repositories.create_file(
                "o",
                "r",
                "a.txt",
                RepositoryContentFileOptions(
                    message="add",
                    content=b"hi",
                    branch="main",
                    committer=CommitAuthor(name="n", email="e@example.com"),
                ),
            )

            assert mux.last_json() == {
                "message": "add",
                "content": "aGk=",
                "branch": "main",
                "committer": {"name": "n", "email": "e@example.com"},
            }
            assert result.commit.sha == "c1"

        def it_updates_a_file(client: Client, mux):
            mux.route("/repos/o/r/contents/a.txt", method="PUT", json={"commit": {"sha": "c2"}})

            client.repositories.update_file(
                "o", "r", "a.txt", RepositoryContentFileOptions(message="m", content=b"x", sha="old")
            )

            assert mux.last_json()["sha"] == "old"

        def it_deletes_a_file_with_a_body(client: Client, mux):
            mux.route("/repos/o/r/contents/a.txt", method="DELETE", json={"content": None, "commit": {"sha": "c3"}})

            result, _ = client.repositories.delete_file(
                "o", "r", "a.txt", RepositoryContentFileOptions(message="rm", sha="old")
            )

            assert mux.last_json() == {"message": "rm", "sha": "old"}
            assert result.content is None

    def describe_get_archive_link():
        def it_returns_the_download_location(client: Client, mux):
            mux.route(
                "/repos/o/r/tarball/v1",
                method="GET",
                status=302,
                headers={"Location": "https://codeload.test/o/r/legacy.tar.gz/v1"},
            )

            url, resp = client.repositories.get_archive_link(
                "o", "r", ArchiveFormat.TARBALL, RepositoryContentGetOptions(ref="v1")
            )

            assert url == "https://codeload.test/o/r/legacy.tar.gz/v1"
            assert resp.status_code == 302

        def it_follows_a_moved_repository(client: Client, mux):
            mux.route(
                "/repos/o/r/zipball",
                status=301,
                headers={"Location": "https://github.test/api-v3/repos/o/moved/zipball"},
            )
            mux.route(
                "/repos/o/moved/zipball",
                status=302,
                headers={"Location": "https://codeload.test/o/moved/zip"},
            )

            url, _ = client.repositories.get_archive_link("o", "r", ArchiveFormat.ZIPBALL, max_redirects=1)

            assert url == "https://codeload.test/o/moved/zip"


def describe_RepositoryContentFileOptions():
    def it_round_trips_raw_bytes_through_base64():
        opts = RepositoryContentFileOptions(content=b"\x00\xff")

        assert opts.to_payload() == {"content": base64.b64encode(b"\x00\xff").decode()}


