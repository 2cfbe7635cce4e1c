"""
Image conversion API tests - POST /jpeg-to-png status codes and PNG output.
"""

import io

import pytest
from httpx import AsyncClient
from PIL import Image

from factories import batch, make_jpeg, make_png, record, truncated_jpeg


@pytest.mark.asyncio
async def test_post_jpeg_to_png(client: AsyncClient):
    response = await client.post("/jpeg-to-png", content=make_jpeg(300, 400))
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    image = Image.open(io.BytesIO(response.content))
    assert image.format == "PNG"
    assert image.size == (192, 256)


@pytest.mark.asyncio
async def test_post_jpeg_to_png_square_upscales(client: AsyncClient):
    response = await client.post("/jpeg-to-png", content=make_jpeg(32, 32))
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (256, 256)


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "TRACE", "FOO"])
async def test_post_jpeg_to_png_incorrect_method(client: AsyncClient, method: str):
    response = await client.request(method, "/jpeg-to-png")
    assert response.status_code == 400
    assert response.text == f"400 Bad Request\nExpected POST request method, instead received {method}"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [batch(record()), make_png(20, 20)])
async def test_post_jpeg_to_png_incorrect_file_type(client: AsyncClient, body: bytes):
    response = await client.post("/jpeg-to-png", content=body)
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "400 Bad Request\ninvalid JPEG format: missing start-of-image marker"


@pytest.mark.asyncio
async def test_post_jpeg_to_png_survives_malformed_input(client: AsyncClient):
    """A bad upload answers 400; the next request is still served."""
    bad = await client.post("/jpeg-to-png", content=truncated_jpeg())
    assert bad.status_code == 400
    assert bad.text == "400 Bad Request\ninvalid JPEG format: image data is truncated or corrupt"

    data = make_jpeg(64, 48)
    good = await client.post("/jpeg-to-png", content=data)
    assert good.status_code == 200
    assert Image.open(io.BytesIO(good.content)).size == (256, 192)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"\xff\xd8\xff\xd9", b"\xff\xd8" + b"\x00" * 32])
async def test_post_jpeg_to_png_unrecognized_data_has_stable_body(client: AsyncClient, body: bytes):
    first = await client.post("/jpeg-to-png", content=body)
    second = await client.post("/jpeg-to-png", content=body)
    assert first.status_code == 400
    assert first.text == "400 Bad Request\ninvalid JPEG format: unrecognized image data"
    assert second.text == first.text
