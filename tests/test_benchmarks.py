import pytest


@pytest.mark.benchmark(group="query", disable_gc=True)
def test_benchmark_query_unique(benchmark):
    from url_tools import MutableURL

    def run_benchmark():
        url = MutableURL.parse("https://example.com/?a=1&b=2&a=3")
        assert url.query_unique_get("a") == "3"
        with url.query_unique() as query:
            query.set_pair("c", "4").pop("b")
        return url

    url = benchmark(run_benchmark)
    assert set(url.raw_query_string.split("&")) == {"a=3", "c=4"}
