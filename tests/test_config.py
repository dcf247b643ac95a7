from config import CHAT, _env_float


def test_env_float_reads_number(monkeypatch):
    monkeypatch.setenv("CHAT_DELAY_SCALE", "0.25")
    assert _env_float("CHAT_DELAY_SCALE", 1.0) == 0.25


def test_env_float_falls_back_on_junk(monkeypatch):
    monkeypatch.setenv("CHAT_DELAY_SCALE", "fast please")
    assert _env_float("CHAT_DELAY_SCALE", 1.0) == 1.0
    monkeypatch.setenv("CHAT_DELAY_SCALE", "   ")
    assert _env_float("CHAT_DELAY_SCALE", 1.0) == 1.0
    monkeypatch.delenv("CHAT_DELAY_SCALE")
    assert _env_float("CHAT_DELAY_SCALE", 1.0) == 1.0


def test_chat_delay_scale_is_a_number():
    assert isinstance(CHAT["delay_scale"], float)
