"""
Unit tests for environment configuration.
"""

from check_es_aggregation.config.environments import get_elasticsearch_config, load_environment


def test_defaults():
    config = get_elasticsearch_config()

    assert config == {
        "url": "http://localhost:9200",
        "username": None,
        "password": None,
        "api_key": None,
        "timeout_ms": 30000,
        "verify_certs": True,
        "ca_certs": None,
    }


def test_read_at_call_time(monkeypatch):
    monkeypatch.setenv("ELASTIC_URL", "http://first:9200")
    first = get_elasticsearch_config()
    monkeypatch.setenv("ELASTIC_URL", "http://second:9200")

    assert first["url"] == "http://first:9200"
    assert get_elasticsearch_config()["url"] == "http://second:9200"


def test_elasticsearch_prefixed_names(monkeypatch):
    monkeypatch.setenv("ELASTICSEARCH_URL", "http://legacy:9200")
    monkeypatch.setenv("ELASTICSEARCH_USERNAME", "elastic")
    monkeypatch.setenv("ELASTICSEARCH_PASSWORD", "changeme")

    config = get_elasticsearch_config()

    assert config["url"] == "http://legacy:9200"
    assert config["username"] == "elastic"
    assert config["password"] == "changeme"


def test_tls_and_timeout(monkeypatch):
    monkeypatch.setenv("ELASTIC_TIMEOUT", "5000")
    monkeypatch.setenv("ELASTIC_VERIFY_CERTS", "False")
    monkeypatch.setenv("ELASTIC_CA_CERTS", "/etc/ssl/es-ca.pem")

    config = get_elasticsearch_config()

    assert config["timeout_ms"] == 5000
    assert config["verify_certs"] is False
    assert config["ca_certs"] == "/etc/ssl/es-ca.pem"


def test_load_environment(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ELASTIC_API_KEY=from-dotenv\nELASTIC_URL=http://dotenv:9200\n")
    monkeypatch.setenv("ELASTIC_URL", "http://already-set:9200")
    # load_dotenv writes to os.environ directly; let monkeypatch undo it
    monkeypatch.setenv("ELASTIC_API_KEY", "")
    monkeypatch.delenv("ELASTIC_API_KEY")

    assert load_environment(str(dotenv)) is True

    config = get_elasticsearch_config()
    assert config["api_key"] == "from-dotenv"
    assert config["url"] == "http://already-set:9200"
