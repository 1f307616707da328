from wordfinder.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MAX_STREAM_WORDS"] == cfg.MAX_STREAM_WORDS


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAX_STREAM_WORDS", "8080")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("DEFAULT_MATRIX", "ab,cd")
    cfg = _fresh_settings()
    assert cfg.MAX_STREAM_WORDS == 8080
    assert cfg.DEBUG is True
    assert cfg.DEFAULT_MATRIX == "ab,cd"


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_STREAM_WORDS=7)
    assert errors == {}
    assert cfg.MAX_STREAM_WORDS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_STREAM_WORDS="12")
    assert errors == {}
    assert cfg.MAX_STREAM_WORDS == 12


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG=True)
    assert errors == {}
    assert cfg.DEBUG is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_log_level_normalized():
    cfg = _fresh_settings()
    errors = update_settings(cfg, LOG_LEVEL="debug")
    assert errors == {}
    assert cfg.LOG_LEVEL == "DEBUG"


def test_update_unknown_log_level_returns_error():
    cfg = _fresh_settings()
    before = cfg.LOG_LEVEL
    errors = update_settings(cfg, LOG_LEVEL="chatty")
    assert "LOG_LEVEL" in errors
    assert cfg.LOG_LEVEL == before


def test_update_bad_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_STREAM_WORDS="lots")
    assert "MAX_STREAM_WORDS" in errors
    assert cfg.MAX_STREAM_WORDS == Settings().MAX_STREAM_WORDS


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEFAULT_MATRIX="ab,cd")
    assert "DEFAULT_MATRIX" in errors
    assert cfg.DEFAULT_MATRIX != "ab,cd"


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_STREAM_WORDS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_STREAM_WORDS == 25
