import httpx
import pytest
from unittest.mock import patch

@pytest.fixture
def mock_http():
    """
    Route every client built by the fetcher through an httpx.MockTransport.

    Usage: calls = mock_http(handler), where handler takes an httpx.Request and
    returns an httpx.Response (sync or async). The returned list records each
    requested URL in arrival order.
    """
    patches = []
    calls = []

    def install(handler):
        async def recording_handler(request: httpx.Request):
            calls.append(str(request.url))
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        def fake_build_client(**kwargs):
            return httpx.AsyncClient(
                transport=httpx.MockTransport(recording_handler),
                follow_redirects=True,
            )

        p = patch("multifetch.fetch.fetcher.build_client", side_effect=fake_build_client)
        p.start()
        patches.append(p)
        return calls

    yield install

    for p in patches:
        p.stop()
