"""
Async dispatch - Same builder over an aiohttp.ClientSession
"""
import asyncio

import aiohttp

from conduitpy import RequestBuilder, RequestHandler


async def main():
    async with aiohttp.ClientSession() as session:
        api = (RequestBuilder()
               .bind_transport(session)
               .set_path('/api/articles')
               .set_query_params({'limit': 3}))

        async with await RequestHandler(api).get_async() as response:
            payload = await response.json()

        print(f"{payload['articlesCount']} articles, showing {len(payload['articles'])}")


if __name__ == "__main__":
    asyncio.run(main())
