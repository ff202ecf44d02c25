"""
Dispatch - Send a built request through a requests.Session
"""
import logging

import requests

from conduitpy import RequestBuilder, RequestHandler, setup_logging


def main():
    logging.basicConfig(format='%(asctime)s - %(levelname)s - %(message)s')
    setup_logging(logging.DEBUG)

    with requests.Session() as session:
        api = RequestBuilder().bind_transport(session)
        handler = RequestHandler(api)
        handler.on('response', lambda descriptor, response: print(
            f"{descriptor.method} {descriptor.url} -> {response.status_code}"
        ))

        api.set_path('/api/tags')
        tags = handler.get().json()['tags']
        print(f"Tags: {', '.join(tags)}")

        api.reset().set_path('/api/articles').set_query_params({'limit': 5, 'offset': 0})
        for article in handler.get().json()['articles']:
            print(f"  {article['title']}")


if __name__ == "__main__":
    main()
