import hashlib
import json

import pytest

import sqeplite.core.metadata as meta_mod
from sqeplite.core.metadata import SealMeta, compute_seal_meta


def test_compute_hash_is_sha256_of_frame():
    frame = b"SQEP4.0-LITE" + bytes(range(40))
    meta = compute_seal_meta(frame)
    assert meta.hash == hashlib.sha256(frame).hexdigest()
    assert meta.hash == meta.hash.lower()
    assert len(meta.hash) == 64


def test_compute_timestamp_uses_wall_clock_seconds(monkeypatch):
    monkeypatch.setattr(meta_mod.time, "time", lambda: 1_700_000_000.75)
    meta = compute_seal_meta(b"x" * 40)
    assert meta.timestamp == 1_700_000_000
    assert isinstance(meta.timestamp, int)


def test_to_dict_and_from_dict_agree():
    meta = SealMeta(timestamp=1234, hash="ab" * 32)
    data = meta.to_dict()
    assert data == {"timestamp": 1234, "hash": "ab" * 32}
    # survives a trip through JSON, as written by the CLI
    assert SealMeta.from_dict(json.loads(json.dumps(data))) == meta


def test_from_dict_normalises_hash_case():
    meta = SealMeta.from_dict({"timestamp": "5", "hash": "AB" * 32})
    assert meta.timestamp == 5
    assert meta.hash == "ab" * 32


def test_from_dict_missing_field_raises():
    with pytest.raises(KeyError):
        SealMeta.from_dict({"timestamp": 1})


def test_matches_detects_changed_frame():
    frame = bytearray(b"SQEP4.0-LITE" + b"\x01" * 40)
    meta = compute_seal_meta(bytes(frame))
    assert meta.matches(bytes(frame))

    frame[-1] ^= 0x01
    assert not meta.matches(bytes(frame))


def test_seal_meta_is_immutable():
    meta = SealMeta(timestamp=1, hash="00" * 32)
    with pytest.raises(Exception):
        meta.timestamp = 2


def test_matches_file_uses_stored_frame(tmp_path):
    frame = b"SQEP4.0-LITE" + bytes(range(60))
    path = tmp_path / "f.sqep"
    path.write_bytes(frame)
    meta = compute_seal_meta(frame)
    assert meta.matches_file(path)
    assert meta.matches_file(str(path))

    path.write_bytes(frame + b"\x00")
    assert not meta.matches_file(path)


def test_matches_file_missing_raises(tmp_path):
    meta = compute_seal_meta(b"x" * 40)
    with pytest.raises(FileNotFoundError):
        meta.matches_file(tmp_path / "missing.sqep")
