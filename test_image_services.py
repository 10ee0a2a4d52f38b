"""Unit tests for image.services using httpx.MockTransport."""
import asyncio
import base64
import json

import httpx
import pytest

from common.exceptions import ConfigurationError, UpstreamError
from config import Config
from image.services import fetch_images_as_base64, synthesize_image, to_data_uri


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestSynthesizeImage:

    def test_sends_prompt_and_fixed_parameters(self, api_keys):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, content=b"jpeg-bytes")

        result = asyncio.run(synthesize_image("A cute baby dog", client=_client(handler)))

        assert result == b"jpeg-bytes"
        assert seen["url"] == Config.HUGGINGFACE_MODEL_URL
        assert seen["auth"] == "Bearer test-hf-key"
        assert seen["body"] == {
            "inputs": "A cute baby dog",
            "parameters": {
                "negative_prompt": "ugly, deformed, low quality, blurry, distorted",
                "num_inference_steps": 30,
                "width": 1024,
                "height": 1024,
            },
        }

    def test_non_success_raises_with_status_and_body(self, api_keys):
        def handler(request):
            return httpx.Response(429, text="Rate limit reached")

        with pytest.raises(UpstreamError) as exc_info:
            asyncio.run(synthesize_image("prompt", client=_client(handler)))

        assert exc_info.value.upstream_status == 429
        assert exc_info.value.upstream_body == "Rate limit reached"
        assert exc_info.value.public_message == "Failed to generate image: 429 - Rate limit reached"

    def test_missing_key_raises_configuration_error(self, no_api_keys):
        def handler(request):
            raise AssertionError("should not be called")

        with pytest.raises(ConfigurationError):
            asyncio.run(synthesize_image("prompt", client=_client(handler)))


class TestFetchImages:

    def test_fetches_all_and_encodes(self):
        images = {
            "https://pets.example/a.jpg": b"aaa",
            "https://pets.example/b.jpg": b"bbb",
        }

        def handler(request):
            return httpx.Response(200, content=images[str(request.url)])

        result = asyncio.run(fetch_images_as_base64(list(images), client=_client(handler)))

        assert [base64.b64decode(r.data) for r in result] == [b"aaa", b"bbb"]
        assert all(r.mime_type == "image/jpeg" for r in result)

    def test_fetches_run_concurrently(self):
        # Each response waits for the other request to arrive, so a
        # one-at-a-time fetch would time out.
        async def run():
            arrived = {"a": asyncio.Event(), "b": asyncio.Event()}

            async def handler(request):
                name = request.url.path.strip("/")[0]
                other = "b" if name == "a" else "a"
                arrived[name].set()
                await asyncio.wait_for(arrived[other].wait(), timeout=2)
                return httpx.Response(200, content=name.encode())

            return await fetch_images_as_base64(
                ["https://pets.example/a.jpg", "https://pets.example/b.jpg"],
                client=_client(handler),
            )

        result = asyncio.run(run())
        assert [base64.b64decode(r.data) for r in result] == [b"a", b"b"]

    def test_any_failure_fails_the_whole_fetch(self):
        def handler(request):
            if request.url.path == "/missing.jpg":
                return httpx.Response(404)
            return httpx.Response(200, content=b"ok")

        with pytest.raises(UpstreamError):
            asyncio.run(fetch_images_as_base64(
                ["https://pets.example/ok.jpg", "https://pets.example/missing.jpg"],
                client=_client(handler),
            ))


def test_to_data_uri():
    assert to_data_uri(b"abc") == "data:image/jpeg;base64,YWJj"
    assert to_data_uri(b"abc", "image/png") == "data:image/png;base64,YWJj"
