from configparser import ConfigParser

import pytest

from utils import MalformedSeedUrl, normalize, parse_seed
from utils.config import Config, DEFAULT_SEED, THREADS_PER_CORE


class TestNormalize:

    def test_strips_query_and_fragment(self):
        assert normalize("https://a.example:8443/p/q?x=1&y=2#top") == "https://a.example:8443/p/q"

    @pytest.mark.parametrize("url", [
        "https://a.example/p?x=1#frag",
        "http://a.example",
        "https://a.example/?",
        "https://a.example/dir/#",
        "mailto:someone@example.com",
    ])
    def test_idempotent(self, url):
        once = normalize(url)
        assert normalize(once) == once

    def test_leaves_path_alone(self):
        assert normalize("https://a.example/a/../b/") == "https://a.example/a/../b/"

    def test_lowercases_scheme_and_host(self):
        assert normalize("HTTPS://Example.COM/Path") == "https://example.com/Path"

    @pytest.mark.parametrize("url", [
        "https://example.com:443/x",
        "http://example.com:80/x",
    ])
    def test_drops_default_port(self, url):
        assert normalize(url).endswith("://example.com/x")

    def test_keeps_other_ports(self):
        assert normalize("http://example.com:443/x") == "http://example.com:443/x"

    def test_empty_path_becomes_root(self):
        assert normalize("https://example.com") == "https://example.com/"
        assert normalize("https://example.com?q=1") == "https://example.com/"

    def test_spellings_of_one_page_agree(self):
        variants = [
            "https://Example.com/x",
            "https://example.com:443/x",
            "HTTPS://EXAMPLE.COM/x#top",
            "https://example.com/x",
        ]
        assert {normalize(url) for url in variants} == {"https://example.com/x"}

    def test_keeps_userinfo_and_ipv6(self):
        assert normalize("https://me@Example.com:8080/") == "https://me@example.com:8080/"
        assert normalize("http://[::1]:80/a") == "http://[::1]/a"

    def test_bad_port_raises(self):
        with pytest.raises(ValueError):
            normalize("http://example.com:abc/")


class TestParseSeed:

    def test_accepts_absolute_url(self):
        assert parse_seed("https://example.com/a") == "https://example.com/a"

    @pytest.mark.parametrize("url", ["example.com/a", "/relative", "", "http://[::1"])
    def test_rejects_malformed(self, url):
        with pytest.raises(MalformedSeedUrl):
            parse_seed(url)

    def test_is_a_value_error(self):
        assert issubclass(MalformedSeedUrl, ValueError)


class TestConfig:

    def test_defaults_without_a_file(self):
        config = Config(ConfigParser())
        assert config.seed_url == DEFAULT_SEED
        assert config.use_cache is True
        assert config.word_tally is False
        assert config.poll_interval == 1.0
        assert "google" in config.forbidden_hosts
        assert "privacy" in config.forbidden_paths
        assert config.threads_count >= THREADS_PER_CORE

    def test_reads_sections(self):
        cparser = ConfigParser()
        cparser.read_dict({
            "IDENTIFICATION": {"USERAGENT": "my crawler"},
            "LOCAL PROPERTIES": {"THREADCOUNT": "7"},
            "CRAWLER": {"FORBIDDENHOSTS": " evil , bad ,", "FORBIDDENPATHS": ""},
            "WORDS": {"ENABLED": "yes", "TOP": "10"},
        })
        config = Config(cparser)
        assert config.user_agent == "my crawler"
        assert config.threads_count == 7
        assert config.forbidden_hosts == frozenset({"evil", "bad"})
        assert config.forbidden_paths == frozenset()
        assert config.word_tally is True
        assert config.top_words == 10

    def test_rejects_odd_user_agent(self):
        cparser = ConfigParser()
        cparser.read_dict({"IDENTIFICATION": {"USERAGENT": "bad/agent"}})
        with pytest.raises(AssertionError):
            Config(cparser)
