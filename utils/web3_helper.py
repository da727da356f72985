from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.middleware import ExtraDataToPOAMiddleware


def get_async_web3(provider_url, proxy=None):
    request_kwargs = {"proxy": proxy} if proxy else {}
    web3 = AsyncWeb3(AsyncHTTPProvider(provider_url, request_kwargs=request_kwargs))
    web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return web3
