import hashlib
import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from txbutil.md5 import MD5, md5_bytes, md5_file, md5_string


def test_empty_input_known_digest():
    assert MD5().finalize().hex() == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert md5_bytes(data) == hashlib.md5(data).digest()


@given(st.binary(max_size=600))
def test_matches_reference(data):
    assert md5_bytes(data) == hashlib.md5(data).digest()


@given(st.binary(max_size=400), st.integers(min_value=1, max_value=70))
def test_chunked_update_equals_one_shot(data, step):
    ctx = MD5()
    for start in range(0, len(data), step):
        ctx.update(data[start:start + step])
    assert ctx.finalize() == md5_bytes(data)


def test_hexdigest_matches_digest():
    ctx = MD5(b"hello world")
    ctx.finalize()
    assert ctx.hexdigest() == hashlib.md5(b"hello world").hexdigest()
    assert bytes.fromhex(ctx.hexdigest()) == ctx.digest()


def test_digest_length():
    assert len(md5_bytes(b"abc")) == 16


def test_finalize_is_idempotent():
    ctx = MD5(b"abc")
    first = ctx.finalize()
    assert ctx.finalize() == first


def test_digest_before_finalize_raises():
    with pytest.raises(ValueError):
        MD5(b"abc").digest()


def test_update_after_finalize_raises():
    ctx = MD5(b"abc")
    ctx.finalize()
    with pytest.raises(ValueError):
        ctx.update(b"more")


def test_reset_allows_reuse():
    ctx = MD5(b"first")
    ctx.finalize()
    ctx.reset()
    ctx.update(b"second")
    assert ctx.finalize() == hashlib.md5(b"second").digest()


def test_update_returns_context_for_chaining():
    ctx = MD5()
    assert ctx.update(b"a").update(b"b").finalize() == hashlib.md5(b"ab").digest()


def test_md5_string_encodes_utf8():
    assert md5_string("héllo") == hashlib.md5("héllo".encode("utf-8")).digest()


def test_md5_string_stops_at_nul():
    assert md5_string("abc\0def") == md5_string("abc")


def test_md5_file_from_stream():
    data = bytes(range(256)) * 20
    assert md5_file(io.BytesIO(data)) == hashlib.md5(data).digest()


def test_md5_file_reads_from_current_position():
    stream = io.BytesIO(b"skipme-payload")
    stream.seek(7)
    assert md5_file(stream) == hashlib.md5(b"payload").digest()


def test_md5_file_on_disk(tmp_path):
    path = tmp_path / "data.bin"
    data = b"x" * 5000
    path.write_bytes(data)
    with path.open("rb") as handle:
        assert md5_file(handle) == hashlib.md5(data).digest()