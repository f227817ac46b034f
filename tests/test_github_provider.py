"""Tests for the GitHub and GitLab RepoProvider adapters."""

from __future__ import annotations

import base64

import pytest
from conftest import fake_client, full_url, json_response, requested_urls, text_response

from module_browser.domain.entities import ModuleReference, TreeFile
from module_browser.domain.exceptions import ContentDecodingError, UpstreamRequestError
from module_browser.infrastructure.github_headers import TokenHeaderProvider
from module_browser.infrastructure.github_provider import GitHubProvider, decode_content
from module_browser.infrastructure.gitlab_provider import GitLabProvider

API = "https://api.github.com/repos/denoland/deno_std"
REF = ModuleReference(type="GitHub", org="denoland", repo="deno_std")


def _provider(client, token: str | None = "t0ken") -> GitHubProvider:
    return GitHubProvider(client, TokenHeaderProvider(token))


class TestHeaders:
    def test_with_token(self):
        headers = TokenHeaderProvider("t0ken").headers_for_github()
        assert headers["Authorization"] == "Bearer t0ken"
        assert headers["Accept"] == "application/vnd.github.v3+json"

    def test_anonymous(self):
        assert "Authorization" not in TokenHeaderProvider(None).headers_for_github()


class TestDefaultBranch:
    async def test_reads_default_branch(self):
        client = fake_client({API: json_response(API, {"default_branch": "main"})})

        assert await _provider(client).fetch_default_branch(REF) == "main"
        assert client.get.call_args.kwargs["headers"]["Authorization"] == "Bearer t0ken"

    async def test_missing_field(self):
        client = fake_client({API: json_response(API, {"message": "Not Found"}, 404)})

        assert await _provider(client).fetch_default_branch(REF) is None


class TestFetchTree:
    async def test_directory_listing(self):
        url = f"{API}/contents/fs?ref=main"
        client = fake_client({
            url: json_response(url, [
                {"name": "mod.ts", "path": "fs/mod.ts", "type": "file", "size": 12},
                {"name": "_util", "path": "fs/_util", "type": "dir"},
            ]),
        })

        tree = await _provider(client).fetch_tree(REF, "/fs", "main")

        assert isinstance(tree, list)
        assert [entry.name for entry in tree] == ["mod.ts", "_util"]
        assert tree[0].size == 12
        assert requested_urls(client) == [url]

    async def test_single_file(self):
        url = f"{API}/contents/mod.ts?ref=v1"
        client = fake_client({
            url: json_response(url, {
                "name": "mod.ts",
                "type": "file",
                "content": "ZXhwb3J0IHt9Owo=",
                "encoding": "base64",
                "download_url": "https://raw.githubusercontent.com/denoland/deno_std/v1/mod.ts",
            }),
        })

        tree = await _provider(client).fetch_tree(REF, "/mod.ts", "v1")

        assert isinstance(tree, TreeFile)
        assert tree.encoding == "base64"

    async def test_without_branchtag_omits_ref(self):
        url = f"{API}/contents/"
        client = fake_client({url: json_response(url, [])})

        assert await _provider(client).fetch_tree(REF, "/", None) == []
        assert client.get.call_args.kwargs["params"] is None

    async def test_branchtag_sent_as_query_param(self):
        tag = "v1.0.0+build#2&x=1"
        url = full_url(f"{API}/contents/mod.ts", {"ref": tag})
        client = fake_client({url: json_response(url, [])})

        await _provider(client).fetch_tree(REF, "/mod.ts", tag)

        call = client.get.call_args
        assert call.args[0] == f"{API}/contents/mod.ts"
        assert call.kwargs["params"] == {"ref": tag}

    async def test_rejection_raises_with_payload(self):
        url = f"{API}/contents/nope?ref=main"
        body = {"message": "Not Found", "documentation_url": "https://docs.github.com"}
        client = fake_client({url: json_response(url, body, status_code=404)})

        with pytest.raises(UpstreamRequestError) as exc_info:
            await _provider(client).fetch_tree(REF, "/nope", "main")

        assert exc_info.value.status_code == 404
        assert exc_info.value.payload == body

    async def test_non_json_rejection(self):
        url = f"{API}/contents/x?ref=main"
        client = fake_client({url: text_response(url, "Bad Gateway", status_code=502)})

        with pytest.raises(UpstreamRequestError) as exc_info:
            await _provider(client).fetch_tree(REF, "/x", "main")

        assert exc_info.value.payload == {"message": "Bad Gateway"}


class TestFetchReadme:
    async def test_case_insensitive_match(self):
        raw = "https://raw.githubusercontent.com/denoland/deno_std/main/ReadMe.MD"
        client = fake_client({raw: text_response(raw, "# std\n")})
        listing = [
            TreeFile(name="mod.ts", type="file"),
            TreeFile(name="ReadMe.MD", type="file", download_url=raw),
        ]

        assert await _provider(client).fetch_readme(listing) == "# std\n"
        assert requested_urls(client) == [raw]

    async def test_error_status_returns_body_text(self):
        raw = "https://raw.githubusercontent.com/denoland/deno_std/main/README.md"
        client = fake_client({raw: text_response(raw, "404: Not Found", status_code=404)})
        listing = [TreeFile(name="README.md", type="file", download_url=raw)]

        assert await _provider(client).fetch_readme(listing) == "404: Not Found"

    async def test_no_readme(self):
        client = fake_client({})
        listing = [TreeFile(name="README.txt", type="file", download_url="https://x")]

        assert await _provider(client).fetch_readme(listing) is None
        client.get.assert_not_called()


class TestReadFile:
    def test_decodes_base64(self):
        encoded = base64.b64encode("export const a = 1;\n".encode()).decode()
        # GitHub inserts newlines into base64 content.
        wrapped = "\n".join(encoded[i : i + 8] for i in range(0, len(encoded), 8))
        entry = TreeFile(
            name="a.ts",
            type="file",
            content=wrapped,
            encoding="base64",
            download_url="https://raw.example/a.ts",
        )

        content, source_url = _provider(fake_client({})).read_file(entry)

        assert content == "export const a = 1;\n"
        assert source_url == "https://raw.example/a.ts"

    def test_without_encoding_is_passed_through(self):
        entry = TreeFile(name="a.ts", type="file", content="plain", download_url="u")

        assert _provider(fake_client({})).read_file(entry) == ("plain", "u")


class TestDecodeContent:
    def test_none_encoding(self):
        assert decode_content("", "none") == ""

    def test_missing_content(self):
        assert decode_content(None, "base64") is None

    def test_unknown_encoding(self):
        with pytest.raises(ContentDecodingError):
            decode_content("abc", "utf-16")


class TestGitLabProvider:
    REF = ModuleReference(type="GitLab", org="someone", repo="glmod")

    async def test_unsupported_steps_return_none(self):
        client = fake_client({})
        provider = GitLabProvider(client)

        assert await provider.fetch_default_branch(self.REF) is None
        assert await provider.fetch_tree(self.REF, "/", "main") is None
        assert await provider.fetch_readme([TreeFile(name="README.md", type="file")]) is None
        assert provider.read_file(TreeFile(name="a.ts", type="file")) is None
        client.get.assert_not_called()

    async def test_branchtags_without_auth_headers(self):
        url = "https://gitlab.com/someone/glmod/refs"
        client = fake_client({url: json_response(url, {"Branches": ["main"], "Tags": []})})

        assert await GitLabProvider(client).fetch_branchtags(self.REF) == ["main"]
        assert client.get.call_args.kwargs["headers"] is None
