import pytest

from conftest import FRESH_SAVE
from fanorona.protocol.errors import CorruptSaveError, SaveIOError
from fanorona.session import persistence
from fanorona.session.persistence import SaveFileStore


def test_missing_file_starts_fresh_game(tmp_path, basic_engine):
    store = SaveFileStore(tmp_path / "fanorona.save")
    session = store.load(basic_engine)
    assert session.turn == 1
    assert session.board == basic_engine.fresh_board()
    assert not store.path.exists()


def test_save_then_load(tmp_path, basic_engine, fresh_session):
    path = tmp_path / "fanorona.save"
    store = SaveFileStore(path)
    fresh_session.turn = 7
    store.save(fresh_session)

    assert path.read_text(encoding="utf-8") == "7" + FRESH_SAVE[1:]
    assert store.load(basic_engine) == fresh_session


def test_corrupt_file_is_reported(tmp_path, basic_engine):
    path = tmp_path / "fanorona.save"
    path.write_text("garbage", encoding="utf-8")
    with pytest.raises(CorruptSaveError):
        SaveFileStore(path).load(basic_engine)


def test_invalid_utf8_is_corrupt(tmp_path, basic_engine):
    path = tmp_path / "fanorona.save"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(CorruptSaveError):
        SaveFileStore(path).load(basic_engine)


def test_unreadable_path_is_io_error(tmp_path, basic_engine):
    # A directory where the file should be
    path = tmp_path / "fanorona.save"
    path.mkdir()
    with pytest.raises(SaveIOError):
        SaveFileStore(path).load(basic_engine)


def test_save_into_missing_directory_is_io_error(tmp_path, fresh_session):
    store = SaveFileStore(tmp_path / "missing" / "fanorona.save")
    with pytest.raises(SaveIOError):
        store.save(fresh_session)


def test_failed_replace_keeps_previous_save(tmp_path, monkeypatch, fresh_session):
    path = tmp_path / "fanorona.save"
    path.write_text(FRESH_SAVE, encoding="utf-8")

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(persistence.os, "replace", broken_replace)
    fresh_session.turn = 9
    with pytest.raises(SaveIOError, match="disk full"):
        SaveFileStore(path).save(fresh_session)

    assert path.read_text(encoding="utf-8") == FRESH_SAVE
    assert sorted(p.name for p in tmp_path.iterdir()) == ["fanorona.save"]


def test_save_leaves_no_temp_file(tmp_path, fresh_session):
    SaveFileStore(tmp_path / "fanorona.save").save(fresh_session)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["fanorona.save"]
