"""
Basic usage - Compose URLs with the fluent builder
"""
from conduitpy import RequestBuilder


def main():
    api = RequestBuilder()

    # No base URL set: the demo API origin is used
    print(api.set_path('/api/tags').compose_url())

    # Query parameters are encoded in insertion order
    url = (api
           .set_path('/api/articles')
           .set_query_params({'limit': 10, 'offset': 0})
           .compose_url())
    print(url)

    # Setters overwrite: only tag=python survives
    api.set_query_params({'author': 'someone'}).set_query_params({'tag': 'python'})
    print(api.compose_url())

    # Start over for the next request
    api.reset().set_base_url('https://example.com/').set_path('users')
    print(api.compose_url())


if __name__ == "__main__":
    main()
